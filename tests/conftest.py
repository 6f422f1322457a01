import logging

import pytest

from cenv import EnvConfig, JsonFormatter, MappingSource, PlainFormatter


@pytest.fixture
def env():
    """Fake environment; mutate it inside a test to set variables."""
    return {}


@pytest.fixture
def cfg(env):
    return EnvConfig(MappingSource(env))


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            if isinstance(h.formatter, (JsonFormatter, PlainFormatter)):
                root.removeHandler(h)
        root.setLevel(level)
