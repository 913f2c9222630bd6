"""
Settings de stockwatch.

El orden importa: cada módulo parcial puede depender de valores definidos en `base`.
"""
from .base import *  # noqa: F401,F403
from .partials.cache import *  # noqa: F401,F403
from .partials.email import *  # noqa: F401,F403
from .partials.stock_alerts import *  # noqa: F401,F403
from .celery import *  # noqa: F401,F403
from .logging import *  # noqa: F401,F403
