from .config import (
    Config,
    EnvReader,
    ParseObserver,
    VarSpec,
    default_reader,
    get_bool,
    get_duration,
    get_float,
    get_int,
    get_int64,
    get_str,
    get_uint,
    get_uint64,
    must_bool,
    must_duration,
    must_float,
    must_int,
    must_int64,
    must_str,
    must_uint,
    must_uint64,
    set_parse_log,
)
from .errors import EnvError, ErrorCode, MissingVariableError, ParseError, RemoteFetchError
from .fatal import die, exit_on_error, fatal_missing, fatal_parse
from .http import FetcherFactory, RemoteFetcher, RequestsFetcher, read_url
from .logger import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
    log_parse_failure,
)
from .parsing import (
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_int64,
    parse_uint,
    parse_uint64,
)
from .variable import EnvVar, lookup

__all__ = [
    "Config",
    "EnvReader",
    "ParseObserver",
    "VarSpec",
    "default_reader",
    "set_parse_log",
    "get_str",
    "get_int",
    "get_int64",
    "get_uint",
    "get_uint64",
    "get_float",
    "get_bool",
    "get_duration",
    "must_str",
    "must_int",
    "must_int64",
    "must_uint",
    "must_uint64",
    "must_float",
    "must_bool",
    "must_duration",
    "EnvVar",
    "lookup",
    "EnvError",
    "ErrorCode",
    "MissingVariableError",
    "ParseError",
    "RemoteFetchError",
    "die",
    "exit_on_error",
    "fatal_missing",
    "fatal_parse",
    "FetcherFactory",
    "RemoteFetcher",
    "RequestsFetcher",
    "read_url",
    "JsonFormatter",
    "PlainFormatter",
    "configure_logging",
    "get_logger",
    "log_parse_failure",
    "parse_int",
    "parse_int64",
    "parse_uint",
    "parse_uint64",
    "parse_float",
    "parse_bool",
    "parse_duration",
]
