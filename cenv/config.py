"""
Typed access to configuration held in environment variables.

Every accessor takes key fragments (see ``canonical_key``) and comes in two
modes:

* ``get_<type>`` returns ``EnvValue(value, error)``. An unset variable reads
  as "" and, except for strings, fails to parse; on failure ``value`` is the
  type's zero and ``error`` an ``EnvValueError``. Nothing is raised.
* ``must_get_<type>`` returns the value or raises a ``FatalEnvError``:
  ``MissingEnvError`` when the variable is not set at all,
  ``InvalidEnvError`` when it is set but unparsable.
"""

from collections.abc import Callable
from functools import partial
from typing import Any, NamedTuple

from .errors import EnvValueError, InvalidEnvError, MissingEnvError, ParseError
from .keys import canonical_key
from .logger import get_logger
from .parsing import parse_bool, parse_float, parse_int, parse_uint
from .sources import EnvSource, OsEnvironSource

log = get_logger("cenv.config")

_parse_float32 = partial(parse_float, bits=32)
_parse_float64 = partial(parse_float, bits=64)
_parse_int32 = partial(parse_int, bits=32)
_parse_int64 = partial(parse_int, bits=64)
_parse_uint32 = partial(parse_uint, bits=32)
_parse_uint64 = partial(parse_uint, bits=64)


class EnvValue(NamedTuple):
    """Result of a fallible lookup; unpacks as ``value, error``."""
    value: Any
    error: EnvValueError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EnvConfig:
    """Environment-backed typed config accessor."""
    def __init__(self, source: EnvSource | None = None) -> None:
        self.source: EnvSource = source if source is not None else OsEnvironSource()

    def __repr__(self) -> str:
        return f"EnvConfig(source={self.source!r})"

    def _get(self, parser: Callable[[str], Any], zero: Any, fragments: tuple[str, ...]) -> EnvValue:
        key = canonical_key(*fragments)
        raw = self.source.lookup(key)
        try:
            return EnvValue(parser(raw or ""))
        except ParseError as e:
            return EnvValue(zero, EnvValueError(key, e))

    def _must_raw(self, fragments: tuple[str, ...]) -> tuple[str, str]:
        key = canonical_key(*fragments)
        raw = self.source.lookup(key)
        if raw is None:
            log.debug("required variable not set", extra={"key": key})
            raise MissingEnvError(key)
        return key, raw

    def _must(self, parser: Callable[[str], Any], fragments: tuple[str, ...]) -> Any:
        key, raw = self._must_raw(fragments)
        try:
            return parser(raw)
        except ParseError as e:
            log.debug("required variable unparsable", extra={"key": key, "code": e.code.name})
            raise InvalidEnvError(key, e) from e

    def get_bool(self, *fragments: str) -> EnvValue:
        return self._get(parse_bool, False, fragments)

    def get_float32(self, *fragments: str) -> EnvValue:
        return self._get(_parse_float32, 0.0, fragments)

    def get_float64(self, *fragments: str) -> EnvValue:
        return self._get(_parse_float64, 0.0, fragments)

    def get_int(self, *fragments: str) -> EnvValue:
        return self._get(parse_int, 0, fragments)

    def get_int32(self, *fragments: str) -> EnvValue:
        return self._get(_parse_int32, 0, fragments)

    def get_int64(self, *fragments: str) -> EnvValue:
        return self._get(_parse_int64, 0, fragments)

    def get_string(self, *fragments: str) -> EnvValue:
        """Raw value, "" when unset; never carries an error."""
        return EnvValue(self.source.lookup(canonical_key(*fragments)) or "")

    def get_uint(self, *fragments: str) -> EnvValue:
        return self._get(parse_uint, 0, fragments)

    def get_uint32(self, *fragments: str) -> EnvValue:
        return self._get(_parse_uint32, 0, fragments)

    def get_uint64(self, *fragments: str) -> EnvValue:
        return self._get(_parse_uint64, 0, fragments)

    def must_get_bool(self, *fragments: str) -> bool:
        return self._must(parse_bool, fragments)

    def must_get_float32(self, *fragments: str) -> float:
        return self._must(_parse_float32, fragments)

    def must_get_float64(self, *fragments: str) -> float:
        return self._must(_parse_float64, fragments)

    def must_get_int(self, *fragments: str) -> int:
        return self._must(parse_int, fragments)

    def must_get_int32(self, *fragments: str) -> int:
        return self._must(_parse_int32, fragments)

    def must_get_int64(self, *fragments: str) -> int:
        return self._must(_parse_int64, fragments)

    def must_get_string(self, *fragments: str) -> str:
        """Raw value; only fails when the variable is unset ("" is returned as is)."""
        return self._must_raw(fragments)[1]

    def must_get_uint(self, *fragments: str) -> int:
        return self._must(parse_uint, fragments)

    def must_get_uint32(self, *fragments: str) -> int:
        return self._must(_parse_uint32, fragments)

    def must_get_uint64(self, *fragments: str) -> int:
        return self._must(_parse_uint64, fragments)
