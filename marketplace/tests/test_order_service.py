from decimal import Decimal
from unittest.mock import patch

import pytest
from model_bakery import baker

from core.exceptions import BusinessLogicError
from marketplace.models import InventoryMovement, Order
from marketplace.services import OrderService


def make_order(*lines, status=Order.OrderStatus.PENDING_PAYMENT):
    order = baker.make(Order, status=status, total_amount=Decimal("0"))
    for variant, quantity in lines:
        baker.make(
            "marketplace.OrderItem",
            order=order,
            variant=variant,
            quantity=quantity,
            price_at_purchase=variant.price,
        )
    return order


def pay(order, capture_on_commit):
    with capture_on_commit(execute=True):
        return OrderService.confirm_payment(order)


@pytest.mark.django_db
class TestConfirmPayment:
    def test_payment_decrements_stock_and_records_sale(self, variant, django_capture_on_commit_callbacks):
        order = make_order((variant, 2))

        with patch("core.jobs.CeleryJobQueue.submit"):
            paid = pay(order, django_capture_on_commit_callbacks)

        assert paid.status == Order.OrderStatus.PAID
        assert paid.paid_at is not None
        variant.refresh_from_db()
        assert variant.stock == 5
        movement = InventoryMovement.objects.get(reference_order=order)
        assert movement.movement_type == InventoryMovement.MovementType.SALE
        assert movement.quantity == -2

    def test_payment_crossing_threshold_submits_job(self, variant, alert_settings, django_capture_on_commit_callbacks):
        order = make_order((variant, 3))

        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            pay(order, django_capture_on_commit_callbacks)

        submit.assert_called_once_with(
            "variant-low-stock",
            {"variant_id": str(variant.id), "recipients": ["a@x.com"]},
        )

    def test_payment_that_stays_above_threshold_does_not_notify(self, variant, alert_settings, django_capture_on_commit_callbacks):
        order = make_order((variant, 1))

        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            pay(order, django_capture_on_commit_callbacks)

        submit.assert_not_called()

    def test_each_line_item_is_evaluated(self, product, alert_settings, django_capture_on_commit_callbacks):
        crossing = baker.make("marketplace.ProductVariant", product=product, sku="A", price="10.00", stock=6)
        already_low = baker.make("marketplace.ProductVariant", product=product, sku="B", price="10.00", stock=4)
        order = make_order((crossing, 2), (already_low, 1))

        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            pay(order, django_capture_on_commit_callbacks)

        submit.assert_called_once()
        assert submit.call_args.args[1]["variant_id"] == str(crossing.id)

    def test_unlimited_stock_is_not_decremented(self, variant, alert_settings, django_capture_on_commit_callbacks):
        variant.has_unlimited_stock = True
        variant.save()
        order = make_order((variant, 5))

        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            pay(order, django_capture_on_commit_callbacks)

        variant.refresh_from_db()
        assert variant.stock == 7
        submit.assert_not_called()

    def test_insufficient_stock_rolls_back_without_notifying(self, product, alert_settings, django_capture_on_commit_callbacks):
        first = baker.make("marketplace.ProductVariant", product=product, sku="A", price="10.00", stock=6)
        short = baker.make("marketplace.ProductVariant", product=product, sku="B", price="10.00", stock=1)
        order = make_order((first, 2), (short, 3))

        with patch("core.jobs.CeleryJobQueue.submit") as submit:
            with pytest.raises(BusinessLogicError):
                pay(order, django_capture_on_commit_callbacks)

        submit.assert_not_called()
        first.refresh_from_db()
        order.refresh_from_db()
        assert first.stock == 6
        assert order.status == Order.OrderStatus.PENDING_PAYMENT

    def test_queue_failure_does_not_block_payment(self, variant, alert_settings, django_capture_on_commit_callbacks):
        order = make_order((variant, 3))

        with patch("core.jobs.CeleryJobQueue.submit", side_effect=ConnectionError("broker down")):
            paid = pay(order, django_capture_on_commit_callbacks)

        assert paid.status == Order.OrderStatus.PAID

    @pytest.mark.parametrize("status", [Order.OrderStatus.PAID, Order.OrderStatus.CANCELLED])
    def test_paid_or_cancelled_orders_are_rejected(self, variant, status):
        order = make_order((variant, 1), status=status)

        with pytest.raises(BusinessLogicError):
            OrderService.confirm_payment(order)
