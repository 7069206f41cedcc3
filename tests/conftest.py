# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - data_set        → the documentation example: an integer ID, a
#                     dotted decimal column, a comma decimal column
#                     and a free-text column
# - app_config      → AppConfig with verbose output turned off
# - fresh_config    → resets the config singleton around a test
#
# ==============================================

import pandas as pd
import pytest

from numerify import config as config_module
from numerify.config import AppConfig, DetectionConfig, ReportingConfig


@pytest.fixture
def data_set() -> pd.DataFrame:
    return pd.DataFrame({
        "ID": [1, 2, 3, 4, 5],
        "col1": ["1.2", "1.3", "1.2", "1", "6"],
        "col2": ["1,2", "1,3", "1,2", "1", "6"],
        "name": ["A", "B", "C", "D", "E"],
    })


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        detection=DetectionConfig(sample_size=30),
        reporting=ReportingConfig(verbose=False),
    )


@pytest.fixture
def fresh_config(monkeypatch):
    monkeypatch.setattr(config_module, "_config_instance", None)
    monkeypatch.delenv("NUMERIFY_SAMPLE_SIZE", raising=False)
    monkeypatch.delenv("NUMERIFY_VERBOSE", raising=False)
    yield
    config_module._config_instance = None
