from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import InventoryMovement


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_client(api_client, staff_user):
    api_client.force_authenticate(user=staff_user)
    return api_client


def stock_url(variant):
    return reverse("admin-variant-stock", kwargs={"pk": variant.pk})


@pytest.mark.django_db
class TestVariantStockEndpoint:
    def test_staff_can_adjust_stock(self, staff_client, variant, staff_user):
        response = staff_client.patch(stock_url(variant), {"stock": 12, "reason": "Llegó pedido"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["stock"] == 12
        movement = InventoryMovement.objects.get(variant=variant)
        assert movement.created_by == staff_user
        assert movement.description == "Llegó pedido"

    def test_crossing_edit_enqueues_notification(
        self, staff_client, variant, alert_settings, django_capture_on_commit_callbacks
    ):
        with patch("core.jobs.CeleryJobQueue.submit") as submit, django_capture_on_commit_callbacks(execute=True):
            response = staff_client.patch(stock_url(variant), {"stock": 4}, format="json")

        assert response.status_code == status.HTTP_200_OK
        submit.assert_called_once_with(
            "variant-low-stock",
            {"variant_id": str(variant.id), "recipients": ["a@x.com"]},
        )

    def test_queue_outage_is_invisible_to_the_user(
        self, staff_client, variant, alert_settings, django_capture_on_commit_callbacks
    ):
        with patch("core.jobs.CeleryJobQueue.submit", side_effect=ConnectionError("broker down")) as submit, \
                django_capture_on_commit_callbacks(execute=True):
            response = staff_client.patch(stock_url(variant), {"stock": 0}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["stock"] == 0
        submit.assert_called_once()

    def test_negative_stock_is_a_validation_error(self, staff_client, variant):
        response = staff_client.patch(stock_url(variant), {"stock": -3}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error"] == "VALIDATION_ERROR"
        assert "stock" in response.data["errors"]

    def test_non_staff_users_are_forbidden(self, api_client, django_user_model, variant):
        user = django_user_model.objects.create_user(username="client", password="pass1234")
        api_client.force_authenticate(user=user)

        response = api_client.patch(stock_url(variant), {"stock": 1}, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["error"] == "NOT_AUTHORIZED"

    def test_anonymous_requests_are_rejected(self, api_client, variant):
        response = api_client.patch(stock_url(variant), {"stock": 1}, format="json")

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)

    def test_list_variants(self, staff_client, variant):
        response = staff_client.get(reverse("admin-variant-list"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]["sku"] == "LAV-50"
        assert response.data[0]["product_name"] == "Aceite de Lavanda"
