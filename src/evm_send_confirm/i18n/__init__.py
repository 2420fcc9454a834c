from .translator import Translator
from .strings import CATALOGS, DEFAULT_LOCALE

__all__ = [
    "Translator",
    "CATALOGS",
    "DEFAULT_LOCALE",
]
