import logging
from typing import Dict, Optional

from .strings import CATALOGS, DEFAULT_LOCALE

logger = logging.getLogger(__name__)


class Translator:
    """
    Localized string lookup.

    Locales are matched on their language part (``"de_CH"`` -> ``"de"``).
    Unknown locales fall back to English; keys missing from a non-English
    catalog fall back to the English string.

    Args:
        locale: Locale tag such as ``"en"``, ``"de"`` or ``"de-DE"``.
        catalogs: Optional catalog override, mainly for tests.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, catalogs: Optional[Dict[str, Dict[str, str]]] = None):
        self._catalogs = catalogs if catalogs is not None else CATALOGS
        self._default = self._catalogs[DEFAULT_LOCALE]
        self.locale = self._resolve(locale)

    def _resolve(self, locale: str) -> str:
        language = (locale or DEFAULT_LOCALE).replace("-", "_").split("_")[0].lower()
        if language not in self._catalogs:
            logger.warning("Unsupported locale %r, falling back to %r", locale, DEFAULT_LOCALE)
            return DEFAULT_LOCALE
        return language

    def get_string(self, key: str, *args: object) -> str:
        """
        Look up ``key`` and substitute positional ``args``.

        Raises:
            KeyError: If ``key`` is missing from the English catalog too.
        """
        template = self._catalogs[self.locale].get(key)
        if template is None:
            template = self._default.get(key)
        if template is None:
            raise KeyError(f"No localized string for {key!r}")
        return template.format(*args) if args else template
