from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .models import GlobalSettings


@dataclass(frozen=True)
class StockAlertSettings:
    threshold: int = 0
    recipients: Tuple[str, ...] = field(default_factory=tuple)
    send_email: bool = False


def get_stock_alert_settings() -> StockAlertSettings:
    obj = GlobalSettings.load()
    return StockAlertSettings(
        threshold=obj.low_stock_threshold,
        recipients=tuple(obj.recipient_list),
        send_email=obj.low_stock_send_email,
    )
