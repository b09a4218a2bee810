"""
Shared fixtures
"""

import pytest

from hyprchoosy.logger import Logger
from hyprchoosy.models import Config, RuleSection


@pytest.fixture(autouse=True)
def reset_logger(monkeypatch, tmp_path):
    """Give every test a fresh logger writing under tmp_path"""
    Logger._instance = None
    Logger._log_file = None
    Logger._log_level = None
    monkeypatch.delenv('HYPRCHOOSY_LOG_LEVEL', raising=False)
    monkeypatch.setattr(Logger, '_get_log_dir', staticmethod(lambda: tmp_path / "log"))
    yield
    Logger._instance = None


@pytest.fixture
def sections():
    """Rule sections used across matcher and routing tests"""
    return {
        "work": RuleSection(name="work", browser="chrome",
                            clients=("slack", "teams"), url=("company.com",)),
        "dev": RuleSection(name="dev", browser="firefox",
                           url=("github.com",)),
    }


@pytest.fixture
def config(sections):
    """Configuration with default browser 'librewolf'"""
    return Config(default_browser="librewolf", sections=sections)
