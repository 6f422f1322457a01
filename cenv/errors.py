from enum import Enum


class ErrorCode(str, Enum):
    """Failure kinds for environment lookups."""
    SYNTAX = "invalid syntax"
    RANGE = "value out of range"

    MISSING = "must be set"


class EnvError(Exception):
    """Base error for the cenv package."""


class ParseError(EnvError, ValueError):
    """Raw text rejected by a type parser."""

    def __init__(self, func: str, text: str, code: ErrorCode) -> None:
        self.func = func
        self.text = text
        self.code = code
        super().__init__(f'{func}: parsing "{text}": {code.value}')


class EnvValueError(EnvError, ValueError):
    """
    Recoverable lookup failure, returned (not raised) by the get_* accessors.
    """

    def __init__(self, key: str, cause: ParseError) -> None:
        self.key = key
        self.cause = cause
        self.code = cause.code
        super().__init__(f"{key}: {cause}")


class FatalEnvError(EnvError, RuntimeError):
    """
    Required configuration is unusable; the process cannot continue.

    Raised by the must_get_* accessors. Not meant to be caught for flow
    control: let it reach ``exit_on_fatal`` or the top of the program.
    """

    def __init__(self, key: str, code: ErrorCode, message: str) -> None:
        self.key = key
        self.code = code
        super().__init__(message)


class MissingEnvError(FatalEnvError):
    """Required variable is not set."""

    def __init__(self, key: str) -> None:
        super().__init__(key, ErrorCode.MISSING, f"{key} must be set")


class InvalidEnvError(FatalEnvError):
    """Required variable is set but cannot be parsed."""

    def __init__(self, key: str, cause: ParseError) -> None:
        self.cause = cause
        super().__init__(key, cause.code, f"{key} can't be got by the error: {cause}")
