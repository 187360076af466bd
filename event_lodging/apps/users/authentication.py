"""
Bearer token authentication for the REST API.
"""

from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """Reads `Authorization: Bearer <token>` instead of DRF's `Token <token>`."""
    keyword = 'Bearer'
