"""Logging helpers for the entity registry.

`PprintLogger` wraps a standard `logging.Logger` so that entity instances and
other structured values can be passed straight to the log methods: pydantic
models are rendered with `model_dump_json()` and other objects with `pformat`.
"""

import inspect
import logging
from pprint import pformat
from typing import Any

from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s - %(pathname)s:%(lineno)d - %(levelname)s - %(message)s"


class PprintLogger:
    """A logger wrapper that adds pprint support to standard logging methods.

    `level` is a threshold of this wrapper alone. Several wrappers may share
    one underlying logger and still log at different levels.
    """

    def __init__(self, logger: logging.Logger, level: int = logging.NOTSET):
        self._logger = logger
        self._level = level

    def _format_message(self, msg: Any, pprint: bool = True) -> str:
        """Format a message, optionally using pprint.

        Strings are passed through unchanged so that %-style arguments still
        work. Pydantic models use model_dump_json(); anything else uses pformat.
        """
        if not pprint or isinstance(msg, str):
            return str(msg)
        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=2)
        return pformat(msg, width=120, depth=None)

    def _log(self, level: int, msg: Any, args: tuple, pprint: bool, kwargs: dict) -> None:
        if level < self._level or not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, self._format_message(msg, pprint=pprint), *args, stacklevel=3, **kwargs)

    def debug(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.DEBUG, msg, args, pprint, kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.INFO, msg, args, pprint, kwargs)

    def warning(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.WARNING, msg, args, pprint, kwargs)

    def error(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.ERROR, msg, args, pprint, kwargs)

    def critical(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.CRITICAL, msg, args, pprint, kwargs)

    def exception(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, args, pprint, kwargs)

    def __getattr__(self, name: str) -> Any:
        """Delegate any other attributes to the underlying logger."""
        return getattr(self._logger, name)


def setup_logging(level: int | str = logging.INFO, name: str | None = None) -> PprintLogger:
    """Set up a logger and return it wrapped in a PprintLogger.

    Args:
        level: Level for the logger and its handler, as an int or a level name.
        name: Logger name. Defaults to the name of the calling function.

    Only one StreamHandler is attached no matter how often this is called
    for the same name. A logger that is already set up is only ever lowered
    to a more verbose level, never raised; each returned wrapper filters to
    its own `level`.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if name is None:
        frame = inspect.currentframe().f_back  # type: ignore[union-attr]
        name = frame.f_code.co_name  # type: ignore[union-attr]
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    else:
        if logger.level == logging.NOTSET or level < logger.level:
            logger.setLevel(level)
        for handler in logger.handlers:
            if level < handler.level:
                handler.setLevel(level)
    return PprintLogger(logger, level=level)
