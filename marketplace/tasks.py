import logging
from smtplib import SMTPException

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(SMTPException, ConnectionError),
    retry_backoff=True,
    retry_kwargs={"max_retries": 3},
)
def send_variant_low_stock_email(self, variant_id, recipients):
    """
    Worker del job "variant-low-stock".

    Lee la variante al momento de ejecutarse; el stock mostrado es el vigente,
    no el del instante en que se detectó el cruce.
    """
    from .models import ProductVariant

    if not recipients:
        logger.warning("Job de stock bajo sin destinatarios para la variante %s", variant_id)
        return "no_recipients"

    try:
        variant = ProductVariant.objects.select_related("product").get(id=variant_id)
    except ProductVariant.DoesNotExist:
        logger.warning("Variante %s no encontrada para notificación de stock.", variant_id)
        return "missing"

    context = {
        "variant": variant,
        "product": variant.product,
        "is_out_of_stock": variant.stock <= 0,
        "admin_url": f"{settings.SITE_URL.rstrip('/')}/admin/marketplace/productvariant/{variant.pk}/change/",
    }
    if context["is_out_of_stock"]:
        subject = f"[Stockwatch] Agotado: {variant}"
    else:
        subject = f"[Stockwatch] Stock bajo: {variant} ({variant.stock} unid.)"

    send_mail(
        subject,
        render_to_string("marketplace/email/variant_low_stock.txt", context),
        settings.DEFAULT_FROM_EMAIL,
        list(recipients),
        html_message=render_to_string("marketplace/email/variant_low_stock.html", context),
        fail_silently=False,
    )
    logger.info(
        "Correo de stock bajo enviado: variant_id=%s, destinatarios=%d, intento=%s",
        variant.id, len(recipients), self.request.retries + 1,
    )
    return "sent"
