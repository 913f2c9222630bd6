import logging
from unittest.mock import patch

import pytest
from django.core import mail
from django.db import transaction

from core.exceptions import BusinessLogicError, JobSubmissionError
from core.services import StockAlertSettings
from marketplace.models import InventoryMovement, ProductVariant
from marketplace.services import CrossingEvent, InventoryService


@pytest.mark.django_db
class TestCheckLowStock:
    def test_crossing_submits_job_on_commit(self, variant, alert_config, job_queue, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            event = InventoryService.check_low_stock(variant, 7, 4, config=alert_config, queue=job_queue)
            # Nada sale hacia la cola antes del commit
            assert job_queue.submitted == []

        assert event == CrossingEvent(variant_id=variant.id, previous_stock=7, new_stock=4, threshold=5)
        assert len(callbacks) == 1
        assert job_queue.submitted == [
            ("variant-low-stock", {"variant_id": str(variant.id), "recipients": ["a@x.com"]}),
        ]

    def test_no_crossing_schedules_nothing(self, variant, alert_config, job_queue, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            assert InventoryService.check_low_stock(variant, 4, 2, config=alert_config, queue=job_queue) is None

        assert callbacks == []
        assert job_queue.submitted == []

    def test_uses_global_settings_when_config_not_injected(
        self, variant, alert_settings, job_queue, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            event = InventoryService.check_low_stock(variant, 6, 5, queue=job_queue)

        assert event.threshold == 5
        assert job_queue.submitted[0][1]["recipients"] == ["a@x.com"]

    def test_default_global_settings_do_not_send(self, variant, job_queue, django_capture_on_commit_callbacks):
        # Por defecto el envío de correo está desactivado
        with django_capture_on_commit_callbacks(execute=True):
            InventoryService.check_low_stock(variant, 7, 0, queue=job_queue)

        assert job_queue.submitted == []

    def test_threshold_comes_from_configuration(self, variant, job_queue):
        config = StockAlertSettings(threshold=10, recipients=("a@x.com",), send_email=True)

        assert InventoryService.check_low_stock(variant, 12, 10, config=config, queue=job_queue) is not None
        assert InventoryService.check_low_stock(variant, 12, 11, config=config, queue=job_queue) is None

    def test_settings_load_failure_does_not_raise(self, variant, job_queue, caplog):
        with patch(
            "marketplace.services.inventory_service.get_stock_alert_settings",
            side_effect=RuntimeError("db caída"),
        ):
            assert InventoryService.check_low_stock(variant, 7, 4, queue=job_queue) is None
        assert "No se pudo cargar la configuración" in caplog.text


@pytest.mark.django_db
class TestAdjustStock:
    def test_manual_edit_updates_stock_and_records_movement(self, variant, staff_user):
        updated = InventoryService.adjust_stock(variant, 10, changed_by=staff_user, reason="Conteo físico")

        assert updated.stock == 10
        variant.refresh_from_db()
        assert variant.stock == 10
        movement = InventoryMovement.objects.get(variant=variant)
        assert movement.movement_type == InventoryMovement.MovementType.ADJUSTMENT
        assert movement.quantity == 3
        assert movement.created_by == staff_user
        assert movement.description == "Conteo físico"

    def test_negative_stock_is_rejected(self, variant):
        with pytest.raises(BusinessLogicError):
            InventoryService.adjust_stock(variant, -1)

        variant.refresh_from_db()
        assert variant.stock == 7

    def test_same_quantity_is_a_no_op(self, variant):
        with patch.object(InventoryService, "check_low_stock") as check:
            InventoryService.adjust_stock(variant, 7)

        check.assert_not_called()
        assert not InventoryMovement.objects.filter(variant=variant).exists()

    def test_previous_stock_is_read_from_storage(self, variant):
        # La instancia en memoria está desactualizada; manda lo almacenado.
        ProductVariant.objects.filter(pk=variant.pk).update(stock=3)
        variant.stock = 50

        with patch.object(InventoryService, "check_low_stock") as check:
            InventoryService.adjust_stock(variant, 1)

        args = check.call_args.args
        assert args[1:] == (3, 1)

    def test_end_to_end_manual_edits(self, variant, alert_settings, django_capture_on_commit_callbacks):
        """Umbral 5: 7 -> 4 envía un correo; 4 -> 2 ya no."""
        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            with django_capture_on_commit_callbacks(execute=True):
                InventoryService.adjust_stock(variant, 4)
            with django_capture_on_commit_callbacks(execute=True):
                InventoryService.adjust_stock(variant, 2)

        submit.assert_called_once_with(
            "variant-low-stock",
            {"variant_id": str(variant.id), "recipients": ["a@x.com"]},
        )

    def test_rolled_back_edit_submits_nothing(self, variant, alert_settings, django_capture_on_commit_callbacks):
        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            with django_capture_on_commit_callbacks(execute=True) as callbacks:
                with pytest.raises(RuntimeError):
                    with transaction.atomic():
                        InventoryService.adjust_stock(variant, 4)
                        raise RuntimeError("fallo posterior al ajuste")

        variant.refresh_from_db()
        assert variant.stock == 7
        assert callbacks == []
        submit.assert_not_called()

    def test_retry_after_rollback_notifies_once(self, variant, alert_settings, django_capture_on_commit_callbacks):
        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            with django_capture_on_commit_callbacks(execute=True):
                with pytest.raises(RuntimeError):
                    with transaction.atomic():
                        InventoryService.adjust_stock(variant, 4)
                        raise RuntimeError("fallo posterior al ajuste")
                InventoryService.adjust_stock(variant, 4)

        submit.assert_called_once()

    def test_end_to_end_runs_worker_and_sends_email(self, variant, alert_settings, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            InventoryService.adjust_stock(variant, 4)

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ["a@x.com"]
        assert "Stock bajo" in message.subject

        with django_capture_on_commit_callbacks(execute=True):
            InventoryService.adjust_stock(variant, 2)
        assert len(mail.outbox) == 1

    def test_queue_failure_does_not_fail_the_edit(self, variant, alert_settings, caplog, django_capture_on_commit_callbacks):
        with patch(
            "core.jobs.CeleryJobQueue.submit",
            side_effect=JobSubmissionError("variant-low-stock", "Broker no disponible"),
        ):
            with caplog.at_level(logging.ERROR):
                with django_capture_on_commit_callbacks(execute=True):
                    updated = InventoryService.adjust_stock(variant, 4)

        assert updated.stock == 4
        variant.refresh_from_db()
        assert variant.stock == 4
        assert "Error encolando notificación de stock bajo" in caplog.text

    def test_unlimited_stock_variant_never_notifies(self, variant, alert_settings, django_capture_on_commit_callbacks):
        variant.has_unlimited_stock = True
        variant.save()

        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            with django_capture_on_commit_callbacks(execute=True):
                InventoryService.adjust_stock(variant, 0)

        submit.assert_not_called()
