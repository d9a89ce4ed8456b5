"""
FoodQ app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class FoodQConfig(AppConfig):
    """FoodQ application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "foodq"
    verbose_name = _("Recipe Queues")
