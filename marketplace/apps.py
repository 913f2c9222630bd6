from django.apps import AppConfig


class MarketplaceConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "marketplace"

    def ready(self):
        # Registra las tareas de Celery del módulo
        import marketplace.tasks  # noqa: F401
