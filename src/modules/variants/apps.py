from django.apps import AppConfig


class VariantsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.variants"
    label = "variants"
