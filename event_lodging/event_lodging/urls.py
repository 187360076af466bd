"""
URL configuration for event_lodging project.
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Authentication
    path('auth/', include('apps.users.urls')),

    # Lodging
    path('', include('apps.hotels.urls')),
]

# Admin site customization
admin.site.site_header = "Event Lodging Admin"
admin.site.site_title = "Event Lodging Admin Portal"
admin.site.index_title = "Welcome to Event Lodging Admin Portal"
