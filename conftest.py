import pytest
from django.core.cache import cache
from model_bakery import baker

from core.models import GlobalSettings
from core.services import StockAlertSettings


class RecordingJobQueue:
    """Cola en memoria que registra los jobs publicados."""

    def __init__(self):
        self.submitted = []

    def submit(self, job_type, payload):
        self.submitted.append((job_type, payload))
        return f"job-{len(self.submitted)}"


@pytest.fixture(autouse=True)
def _clear_cache():
    # GlobalSettings vive en caché; la DB se revierte entre tests pero la caché no.
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def job_queue():
    return RecordingJobQueue()


@pytest.fixture
def alert_config():
    return StockAlertSettings(threshold=5, recipients=("a@x.com",), send_email=True)


@pytest.fixture
def alert_settings(db):
    """Configuración global con alertas activas: umbral 5, un destinatario."""
    settings_obj = GlobalSettings.load()
    settings_obj.low_stock_threshold = 5
    settings_obj.low_stock_recipients = "a@x.com"
    settings_obj.low_stock_send_email = True
    settings_obj.save()
    return settings_obj


@pytest.fixture
def product(db):
    return baker.make("marketplace.Product", name="Aceite de Lavanda")


@pytest.fixture
def variant(db, product):
    return baker.make(
        "marketplace.ProductVariant",
        product=product,
        name="50ml",
        sku="LAV-50",
        price="45000.00",
        stock=7,
        has_unlimited_stock=False,
    )


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="staff",
        email="staff@example.com",
        password="pass1234",
        is_staff=True,
    )
