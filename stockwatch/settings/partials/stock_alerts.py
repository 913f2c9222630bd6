# --------------------------------------------------------------------------------------
# Alertas de stock
# --------------------------------------------------------------------------------------
# Tipo de job -> ruta de la tarea Celery que lo ejecuta.
STOCKWATCH_JOB_TASKS = {
    "variant-low-stock": "marketplace.tasks.send_variant_low_stock_email",
}
