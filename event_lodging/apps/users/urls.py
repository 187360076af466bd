"""
URL configuration for users app.
"""

from django.urls import re_path
from . import views

app_name = 'users'

urlpatterns = [
    re_path(r'^sign-in/?$', views.SignInView.as_view(), name='sign_in'),
]
