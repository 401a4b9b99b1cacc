from enum import Enum


class ErrorCode(str, Enum):
    """Failure kinds reported by accessors."""
    MISSING = "missing"
    PARSE = "parse"
    REMOTE = "remote"


class EnvError(RuntimeError):
    """Base error for environment lookups."""
    code: ErrorCode

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class MissingVariableError(EnvError):
    """Required variable is not set."""
    code = ErrorCode.MISSING

    def __init__(self, key: str) -> None:
        super().__init__(key, f"env: {key} not set")


class ParseError(EnvError, ValueError):
    """Variable is set but cannot be parsed into the requested type."""
    code = ErrorCode.PARSE

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(key, f"env: {key} parse error: {reason}")
        self.value = value
        self.reason = reason


class RemoteFetchError(EnvError):
    """Fetching the URL held by a variable failed."""
    code = ErrorCode.REMOTE

    def __init__(self, message: str, status_code: int | None = None, key: str = "") -> None:
        super().__init__(key, message)
        self.status_code = status_code
