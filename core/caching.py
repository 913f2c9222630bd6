"""
Claves de caché centralizadas.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKeys:
    """
    Contenedor inmutable de las claves de caché del sistema.

    Uso:
        from core.caching import CacheKeys
        cache.get(CacheKeys.GLOBAL_SETTINGS)
    """
    # Configuración global
    GLOBAL_SETTINGS = "core:global_settings:v1"


# Alias usado por los modelos
GLOBAL_SETTINGS_CACHE_KEY = CacheKeys.GLOBAL_SETTINGS
