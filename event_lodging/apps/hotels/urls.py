"""
URL configuration for hotels app.
"""

from django.urls import re_path
from . import views

app_name = 'hotels'

urlpatterns = [
    re_path(r'^hotels/?$', views.HotelListView.as_view(), name='hotel_list'),
    re_path(r'^hotels/(?P<hotel_id>[^/]+)/?$', views.HotelDetailView.as_view(), name='hotel_detail'),
]
