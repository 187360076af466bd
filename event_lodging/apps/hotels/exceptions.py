"""
Errors raised while serving hotel data.
"""

from rest_framework import status
from rest_framework.exceptions import APIException
from django.utils.translation import gettext_lazy as _


class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _('No result for this search!')
    default_code = 'not_found'


class PaymentRequiredError(APIException):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    default_detail = _('Your ticket must be paid, presential and include a hotel.')
    default_code = 'payment_required'
