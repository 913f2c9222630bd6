"""
Módulo de modelos core.
"""
from .base import BaseModel
from .settings import GLOBAL_SETTINGS_SINGLETON_UUID, GlobalSettings, parse_recipients

from ..caching import GLOBAL_SETTINGS_CACHE_KEY

__all__ = [
    'BaseModel',
    'GlobalSettings',
    'GLOBAL_SETTINGS_CACHE_KEY',
    'GLOBAL_SETTINGS_SINGLETON_UUID',
    'parse_recipients',
]
