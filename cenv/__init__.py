"""
cenv: typed configuration values from environment variables.

The module-level accessors read the process environment::

    import cenv

    port = cenv.must_get_uint32("app.port")
    debug, err = cenv.get_bool("app", "debug")
"""

from .config import EnvConfig, EnvValue
from .errors import (
    EnvError,
    EnvValueError,
    ErrorCode,
    FatalEnvError,
    InvalidEnvError,
    MissingEnvError,
    ParseError,
)
from .keys import EnvKey, canonical_key
from .logger import JsonFormatter, PlainFormatter, configure_logging, get_logger
from .parsing import NATIVE_BITS, parse_bool, parse_float, parse_int, parse_uint
from .sources import EnvSource, MappingSource, OsEnvironSource
from .startup import exit_on_fatal

default_config = EnvConfig(OsEnvironSource())

get_bool = default_config.get_bool
get_float32 = default_config.get_float32
get_float64 = default_config.get_float64
get_int = default_config.get_int
get_int32 = default_config.get_int32
get_int64 = default_config.get_int64
get_string = default_config.get_string
get_uint = default_config.get_uint
get_uint32 = default_config.get_uint32
get_uint64 = default_config.get_uint64

must_get_bool = default_config.must_get_bool
must_get_float32 = default_config.must_get_float32
must_get_float64 = default_config.must_get_float64
must_get_int = default_config.must_get_int
must_get_int32 = default_config.must_get_int32
must_get_int64 = default_config.must_get_int64
must_get_string = default_config.must_get_string
must_get_uint = default_config.must_get_uint
must_get_uint32 = default_config.must_get_uint32
must_get_uint64 = default_config.must_get_uint64

__all__ = [
    "EnvConfig",
    "EnvValue",
    "default_config",
    "EnvSource",
    "OsEnvironSource",
    "MappingSource",
    "EnvKey",
    "canonical_key",
    "ErrorCode",
    "EnvError",
    "ParseError",
    "EnvValueError",
    "FatalEnvError",
    "MissingEnvError",
    "InvalidEnvError",
    "NATIVE_BITS",
    "parse_bool",
    "parse_int",
    "parse_uint",
    "parse_float",
    "exit_on_fatal",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
    "get_bool",
    "get_float32",
    "get_float64",
    "get_int",
    "get_int32",
    "get_int64",
    "get_string",
    "get_uint",
    "get_uint32",
    "get_uint64",
    "must_get_bool",
    "must_get_float32",
    "must_get_float64",
    "must_get_int",
    "must_get_int32",
    "must_get_int64",
    "must_get_string",
    "must_get_uint",
    "must_get_uint32",
    "must_get_uint64",
]
