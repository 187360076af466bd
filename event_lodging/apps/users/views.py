"""
Views for user authentication.
"""

import logging

from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import BearerTokenAuthentication
from .serializers import SignInSerializer

logger = logging.getLogger(__name__)


class SignInView(APIView):
    """Exchange email and password for a bearer token."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def get_authenticate_header(self, request):
        # Keeps bad credentials a 401 rather than a 403
        return BearerTokenAuthentication().authenticate_header(request)

    def post(self, request):
        serializer = SignInSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        token, created = Token.objects.get_or_create(user=user)
        if created:
            logger.info(f"Issued API token for user {user.id}")

        return Response({
            'user': {'id': user.id, 'email': user.email},
            'token': token.key,
        }, status=status.HTTP_200_OK)
