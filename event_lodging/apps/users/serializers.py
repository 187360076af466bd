"""
Serializers for user sign-in.
"""

from django.contrib.auth import authenticate
from django.contrib.auth import get_user_model
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

User = get_user_model()


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        request = self.context.get('request')
        email = attrs['email']

        # Email is not unique on auth.User, so try every account holding it
        user = None
        for candidate in User.objects.filter(email__iexact=email).order_by('id'):
            user = authenticate(
                request,
                username=candidate.get_username(),
                password=attrs['password']
            )
            if user is not None:
                break

        if user is None:
            raise AuthenticationFailed(_('Email or password are incorrect.'))

        attrs['user'] = user
        return attrs
