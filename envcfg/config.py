import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Protocol, TypeVar

from .errors import MissingVariableError, ParseError
from .fatal import exit_on_error
from .parsing import (
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_int64,
    parse_uint,
    parse_uint64,
)

T = TypeVar("T")

ParseObserver = Callable[[ParseError], None]


def _ignore_parse_error(err: ParseError) -> None:
    return None


class Config(Protocol):
    """Typed config interface."""
    def get_str(self, name: str, default: str, description: str = "") -> str:
        ...
    def get_int(self, name: str, default: int, description: str = "") -> int:
        ...
    def get_int64(self, name: str, default: int, description: str = "") -> int:
        ...
    def get_uint(self, name: str, default: int, description: str = "") -> int:
        ...
    def get_uint64(self, name: str, default: int, description: str = "") -> int:
        ...
    def get_float(self, name: str, default: float, description: str = "") -> float:
        ...
    def get_bool(self, name: str, default: bool, description: str = "") -> bool:
        ...
    def get_duration(self, name: str, default: timedelta, description: str = "") -> timedelta:
        ...


@dataclass(frozen=True)
class VarSpec:
    """What a caller asked for, kept for usage text."""
    name: str
    kind: str
    description: str
    required: bool


class EnvReader:
    """
    Environment-backed config provider.

    get_* accessors never raise: an unparseable value is reported to
    ``on_parse_error`` and the default is returned. must_* accessors raise
    MissingVariableError or ParseError instead.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        on_parse_error: ParseObserver | None = None,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self.on_parse_error: ParseObserver = on_parse_error or _ignore_parse_error
        self._specs: dict[str, VarSpec] = {}

    def describe(self) -> list[VarSpec]:
        """Returns every variable requested so far, in first-use order."""
        return list(self._specs.values())

    def _record(self, name: str, kind: str, description: str, required: bool) -> None:
        prev = self._specs.get(name)
        if prev is None:
            self._specs[name] = VarSpec(name, kind, description, required)
        elif required and not prev.required:
            self._specs[name] = replace(prev, required=True)

    def _get(self, name: str, default: T, description: str, kind: str, parse: Callable[[str], T]) -> T:
        self._record(name, kind, description, required=False)
        raw = self._environ.get(name)
        if raw is None:
            return default
        try:
            return parse(raw)
        except ValueError as e:
            self.on_parse_error(ParseError(name, raw, str(e)))
            return default

    def _must(self, name: str, description: str, kind: str, parse: Callable[[str], T]) -> T:
        self._record(name, kind, description, required=True)
        raw = self._environ.get(name)
        if raw is None:
            raise MissingVariableError(name)
        try:
            return parse(raw)
        except ValueError as e:
            raise ParseError(name, raw, str(e)) from None

    def get_str(self, name: str, default: str, description: str = "") -> str:
        return self._get(name, default, description, "string", str)

    def get_int(self, name: str, default: int, description: str = "") -> int:
        return self._get(name, default, description, "int", parse_int)

    def get_int64(self, name: str, default: int, description: str = "") -> int:
        return self._get(name, default, description, "int64", parse_int64)

    def get_uint(self, name: str, default: int, description: str = "") -> int:
        return self._get(name, default, description, "uint", parse_uint)

    def get_uint64(self, name: str, default: int, description: str = "") -> int:
        return self._get(name, default, description, "uint64", parse_uint64)

    def get_float(self, name: str, default: float, description: str = "") -> float:
        return self._get(name, default, description, "float", parse_float)

    def get_bool(self, name: str, default: bool, description: str = "") -> bool:
        return self._get(name, default, description, "bool", parse_bool)

    def get_duration(self, name: str, default: timedelta, description: str = "") -> timedelta:
        return self._get(name, default, description, "duration", parse_duration)

    def must_str(self, name: str, description: str = "") -> str:
        return self._must(name, description, "string", str)

    def must_int(self, name: str, description: str = "") -> int:
        return self._must(name, description, "int", parse_int)

    def must_int64(self, name: str, description: str = "") -> int:
        return self._must(name, description, "int64", parse_int64)

    def must_uint(self, name: str, description: str = "") -> int:
        return self._must(name, description, "uint", parse_uint)

    def must_uint64(self, name: str, description: str = "") -> int:
        return self._must(name, description, "uint64", parse_uint64)

    def must_float(self, name: str, description: str = "") -> float:
        return self._must(name, description, "float", parse_float)

    def must_bool(self, name: str, description: str = "") -> bool:
        return self._must(name, description, "bool", parse_bool)

    def must_duration(self, name: str, description: str = "") -> timedelta:
        return self._must(name, description, "duration", parse_duration)


_default = EnvReader()


def default_reader() -> EnvReader:
    """Returns the process-wide reader behind the module-level accessors."""
    return _default


def set_parse_log(observer: ParseObserver) -> None:
    """
    Replaces the parse-failure observer of the process-wide reader.

    Meant to run once at startup, before any accessor; last call wins and
    there is no locking. Returns None so it can sit in a top-level
    assignment: ``_ = set_parse_log(log_parse_failure)``.
    """
    _default.on_parse_error = observer


def get_str(name: str, default: str, description: str = "") -> str:
    return _default.get_str(name, default, description)


def get_int(name: str, default: int, description: str = "") -> int:
    return _default.get_int(name, default, description)


def get_int64(name: str, default: int, description: str = "") -> int:
    return _default.get_int64(name, default, description)


def get_uint(name: str, default: int, description: str = "") -> int:
    return _default.get_uint(name, default, description)


def get_uint64(name: str, default: int, description: str = "") -> int:
    return _default.get_uint64(name, default, description)


def get_float(name: str, default: float, description: str = "") -> float:
    return _default.get_float(name, default, description)


def get_bool(name: str, default: bool, description: str = "") -> bool:
    return _default.get_bool(name, default, description)


def get_duration(name: str, default: timedelta, description: str = "") -> timedelta:
    return _default.get_duration(name, default, description)


# Module-level must_* exit the process on failure.

@exit_on_error
def must_str(name: str, description: str = "") -> str:
    return _default.must_str(name, description)


@exit_on_error
def must_int(name: str, description: str = "") -> int:
    return _default.must_int(name, description)


@exit_on_error
def must_int64(name: str, description: str = "") -> int:
    return _default.must_int64(name, description)


@exit_on_error
def must_uint(name: str, description: str = "") -> int:
    return _default.must_uint(name, description)


@exit_on_error
def must_uint64(name: str, description: str = "") -> int:
    return _default.must_uint64(name, description)


@exit_on_error
def must_float(name: str, description: str = "") -> float:
    return _default.must_float(name, description)


@exit_on_error
def must_bool(name: str, description: str = "") -> bool:
    return _default.must_bool(name, description)


@exit_on_error
def must_duration(name: str, description: str = "") -> timedelta:
    return _default.must_duration(name, description)
