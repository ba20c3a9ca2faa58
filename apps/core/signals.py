# apps/core/signals.py

from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Usuario


@receiver(pre_save, sender=Usuario)
def normalizar_email(sender, instance, **kwargs):
    """
    Mantém email em minúsculas e sincronizado com o username
    Login é feito por email, então username nunca diverge dele
    """
    if instance.email:
        instance.email = instance.email.strip().lower()
        instance.username = instance.email
