"""Shared fixtures for the Redrum test suite."""

import pytest

from shared.config import Config
from shared.logger import RedrumLogger
from redrum.core.engine import RedrumEngine


@pytest.fixture
def silent_logger():
    return RedrumLogger("test", console_output=False)


@pytest.fixture
def engine(silent_logger):
    return RedrumEngine(Config(), logger=silent_logger)


@pytest.fixture
def strict_engine(silent_logger):
    config = Config()
    config.redrum.strict_alphabet = True
    return RedrumEngine(config, logger=silent_logger)
