from collections.abc import Iterator
from contextlib import contextmanager

from .errors import FatalEnvError
from .logger import get_logger

log = get_logger("cenv.startup")


@contextmanager
def exit_on_fatal(exit_code: int = 1) -> Iterator[None]:
    """
    Turns a FatalEnvError into process exit.

    Usable as ``with exit_on_fatal():`` around startup config reads or as a
    ``@exit_on_fatal()`` decorator on the entrypoint. Logs the error at
    CRITICAL and raises SystemExit(exit_code); other errors propagate.
    """
    try:
        yield
    except FatalEnvError as e:
        log.critical(str(e), extra={"key": e.key, "code": e.code.name})
        raise SystemExit(exit_code) from e
