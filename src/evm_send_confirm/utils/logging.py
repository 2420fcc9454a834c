from __future__ import annotations

import logging
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_ROOT_NAME = "evm_send_confirm"


def coerce_level(value: Optional[int | str], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level, ``fallback`` when unknown."""
    if value is None:
        return fallback
    if isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def configure_root(default_level: int | str = logging.INFO) -> int:
    """
    Configure the root logger with a compact format.

    Safe to call more than once; handlers are only installed the first time.

    Returns:
        The level that was applied.
    """
    level = coerce_level(default_level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(level)
    return level


class AppLogger:
    """
    Scoped logger passed along user actions.

    Each scope extends the logger name, so a send attempt logs under e.g.
    ``evm_send_confirm.send.swap``.

    Example:
        logger = AppLogger("send")
        logger.get_scoped("swap").info("send clicked")
    """

    def __init__(self, group: str, parent: Optional[str] = None) -> None:
        self.group = group
        base = parent or _ROOT_NAME
        self.name = f"{base}.{group}" if group else base
        self._logger = logging.getLogger(self.name)

    def get_scoped(self, scope: str) -> "AppLogger":
        return AppLogger(scope, parent=self.name)

    def debug(self, message: str, *args: object) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: object) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: object) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: object, exc_info: bool = False) -> None:
        self._logger.error(message, *args, exc_info=exc_info)

    def __repr__(self) -> str:
        return f"AppLogger({self.name})"
