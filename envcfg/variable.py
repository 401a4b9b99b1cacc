"""
Value handle over a single environment lookup.

``lookup`` snapshots one variable; the methods on the returned EnvVar decide
what to do with it. Failure callbacks are supplied by the caller and are
expected to stop the process or raise (see envcfg.fatal); when they return,
the method carries on and still returns a value.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .errors import RemoteFetchError
from .http import FetcherFactory, RemoteFetcher
from .parsing import parse_int


@dataclass(frozen=True)
class EnvVar:
    """One variable as seen at lookup time."""
    name: str
    value: str
    is_set: bool

    def with_default(self, fallback: str) -> str:
        return self.value if self.is_set else fallback

    def required(self, on_missing: Callable[[str], None]) -> str:
        """
        Returns the raw value. If unset, on_missing(name) runs first and the
        empty value is returned if it comes back.

        Example:
            lookup("DATABASE_URL").required(fatal_missing)
        """
        if not self.is_set:
            on_missing(self.name)
        return self.value

    def with_default_int(self, fallback: int, on_parse_error: Callable[[str, Exception], None]) -> int:
        """
        Returns fallback when unset. When set but not an integer,
        on_parse_error(name, err) runs and 0 is returned, not fallback.
        EnvReader.get_int returns its default in that case instead; the two
        are kept distinct on purpose.
        """
        if not self.is_set:
            return fallback
        try:
            return parse_int(self.value)
        except ValueError as e:
            on_parse_error(self.name, e)
            return 0

    def list(self, sep: str) -> list[str]:
        """Splits the raw value on sep. An empty value gives [""]."""
        if sep == "":
            return [c for c in self.value]
        return self.value.split(sep)

    def remote(
        self,
        on_error: Callable[[str, Exception | None], None],
        fetcher: RemoteFetcher | None = None,
    ) -> bytes:
        """
        Treats the value as a URL and returns the body of a GET to it.

        An unset variable reports on_error(name, None) and the (empty) URL is
        still requested. Transport errors and non-200 statuses report
        on_error(name, err) and return b"".
        """
        if not self.is_set:
            on_error(self.name, None)
        fetcher = fetcher or FetcherFactory.default()
        try:
            return fetcher.get_bytes(self.value)
        except RemoteFetchError as e:
            e.key = self.name
            on_error(self.name, e)
            return b""


def lookup(name: str, environ: Mapping[str, str] | None = None) -> EnvVar:
    """Reads one variable; os.environ unless environ is given."""
    env = environ if environ is not None else os.environ
    value = env.get(name)
    return EnvVar(name=name, value=value or "", is_set=value is not None)
