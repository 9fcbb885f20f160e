import pytest

from minilisp.builtin.env_builtin import register
from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment

# Configuration is read from MINILISP_* environment variables; modules that
# build interpreters use clean_config to start from the defaults.
_CONFIG_VARS = (
    "MINILISP_MAX_DEPTH",
    "MINILISP_SET_IN_GLOBAL",
    "MINILISP_PROMPT",
    "MINILISP_LOG_LEVEL",
)


@pytest.fixture
def clean_config(monkeypatch):
    for var in _CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return register(Environment())


@pytest.fixture
def interp(clean_config):
    return Interpreter()
