"""
Admin configuration for Hotel models.
"""

from django.contrib import admin
from django.db.models import Count, Sum
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from .models import Hotel, Room


class RoomInline(admin.TabularInline):
    """Inline for hotel rooms."""
    model = Room
    extra = 0
    fields = ['name', 'capacity']


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    """Admin configuration for Hotel model."""

    inlines = [RoomInline]

    list_display = ['name', 'image_preview', 'room_count', 'capacity', 'created_at']
    search_fields = ['name']
    readonly_fields = ['created_at', 'updated_at']
    list_per_page = 25

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _room_count=Count('rooms'),
            _capacity=Sum('rooms__capacity')
        )

    def image_preview(self, obj):
        if obj.image:
            return format_html(
                '<img src="{}" width="60" height="60" style="object-fit: cover;" />',
                obj.image
            )
        return "-"
    image_preview.short_description = _('Image')

    def room_count(self, obj):
        return obj._room_count
    room_count.short_description = _('Rooms')
    room_count.admin_order_field = '_room_count'

    def capacity(self, obj):
        return obj._capacity or 0
    capacity.short_description = _('Capacity')
    capacity.admin_order_field = '_capacity'


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    """Admin configuration for Room model."""

    list_display = ['name', 'hotel', 'capacity', 'created_at']
    list_filter = ['hotel']
    search_fields = ['name', 'hotel__name']
    list_select_related = ['hotel']
    readonly_fields = ['created_at', 'updated_at']
