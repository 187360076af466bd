"""
Event enrollment models for Event Lodging.
"""

from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

cpf_validator = RegexValidator(r'^\d{11}$', _('CPF must contain exactly 11 digits.'))
cep_validator = RegexValidator(r'^\d{5}-?\d{3}$', _('CEP must look like 00000-000.'))


class Enrollment(models.Model):
    """Registration of a user in the event."""
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='enrollment'
    )
    name = models.CharField(_('full name'), max_length=255)
    cpf = models.CharField(
        _('CPF'),
        max_length=11,
        unique=True,
        validators=[cpf_validator]
    )
    birthday = models.DateField(_('birthday'))
    phone = models.CharField(_('phone'), max_length=20)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = _('Enrollment')
        verbose_name_plural = _('Enrollments')

    def __str__(self):
        return f"{self.name} ({self.user})"


class Address(models.Model):
    """Postal address attached to an enrollment."""
    enrollment = models.OneToOneField(
        Enrollment,
        on_delete=models.CASCADE,
        related_name='address'
    )
    cep = models.CharField(_('CEP'), max_length=9, validators=[cep_validator])
    street = models.CharField(_('street'), max_length=255)
    city = models.CharField(_('city'), max_length=255)
    state = models.CharField(_('state'), max_length=2)
    number = models.CharField(_('number'), max_length=20)
    neighborhood = models.CharField(_('neighborhood'), max_length=255)
    address_detail = models.CharField(_('address detail'), max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Address')
        verbose_name_plural = _('Addresses')

    def __str__(self):
        return f"{self.street}, {self.number} - {self.city}/{self.state}"
