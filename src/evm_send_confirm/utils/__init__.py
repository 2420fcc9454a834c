from .logging import AppLogger, configure_root, coerce_level

__all__ = [
    "AppLogger",
    "configure_root",
    "coerce_level",
]
