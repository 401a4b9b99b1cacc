"""
Process-exit policy for required configuration.

Readers raise EnvError; this module is the single place that turns one into
a diagnostic on stderr and a non-zero exit.
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import NoReturn, TypeVar

from .errors import EnvError
from .logger import get_logger

T = TypeVar("T")

EXIT_CODE = 1

log = get_logger("envcfg.fatal")


def die(message: str) -> NoReturn:
    """Writes message to stderr once and exits with EXIT_CODE."""
    # Without configured handlers logging falls back to stderr itself.
    if log.hasHandlers():
        log.error(message)
    sys.stderr.write(message + "\n")
    sys.stderr.flush()
    sys.exit(EXIT_CODE)


def exit_on_error(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator: EnvError raised by func terminates the process."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except EnvError as e:
            die(str(e))
    return wrapper


def fatal_missing(key: str) -> NoReturn:
    """on_missing callback for EnvVar.required."""
    die(f"env: {key} not set")


def fatal_parse(key: str, err: Exception | None) -> NoReturn:
    """Error callback for EnvVar.with_default_int and EnvVar.remote."""
    if err is None:
        die(f"env: {key} not set")
    die(f"env: {key} parse error: {err}")
