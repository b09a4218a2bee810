"""
Configuration loading for hyprchoosy

The configuration is a TOML file with an optional ``[default]`` table and
any number of rule tables::

    [default]
    browser = "firefox"

    [work]
    browser = "chromium"
    clients = ["slack", "teams"]
    url = ["company.com"]
"""

import os
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Mapping, Dict, Any, Tuple

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import ConfigException
from .logger import get_logger
from .models import Config, RuleSection, DEFAULT_BROWSER


CONFIG_ENV_VAR = "HYPRCHOOSY_CONFIG"
DEFAULT_SECTION = "default"


def xdg_config_home(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get XDG configuration home"""
    if environ is None:
        environ = os.environ

    if environ.get("XDG_CONFIG_HOME"):
        return Path(environ["XDG_CONFIG_HOME"])

    home = environ.get("HOME") or "."
    return Path(home) / ".config"


def config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get configuration file path, honouring HYPRCHOOSY_CONFIG"""
    if environ is None:
        environ = os.environ

    override = environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)

    return xdg_config_home(environ) / "hyprchoosy" / "config.toml"


def _string_tuple(section: str, key: str, value: Any) -> Tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigException(
            f"Invalid config: [{section}] {key} must be a list of strings"
        )
    return tuple(value)


def _parse_default(table: Any) -> str:
    if not isinstance(table, dict):
        raise ConfigException(f"Invalid config: [{DEFAULT_SECTION}] must be a table")

    browser = table.get("browser", DEFAULT_BROWSER)
    if not isinstance(browser, str) or not browser:
        raise ConfigException(
            f"Invalid config: [{DEFAULT_SECTION}] browser must be a non-empty string"
        )
    return browser


def _parse_section(name: str, table: Any) -> RuleSection:
    if not isinstance(table, dict):
        raise ConfigException(f"Invalid config: '{name}' must be a table")

    browser = table.get("browser")
    if not isinstance(browser, str) or not browser:
        raise ConfigException(
            f"Invalid config: [{name}] requires a non-empty 'browser' string"
        )

    return RuleSection(
        name=name,
        browser=browser,
        clients=_string_tuple(name, "clients", table.get("clients", [])),
        url=_string_tuple(name, "url", table.get("url", [])),
    )


def parse_config(text: str) -> Config:
    """
    Parse configuration text

    Args:
        text: TOML document

    Returns:
        Parsed Config with sections in file order

    Raises:
        ConfigException: Invalid TOML or malformed tables
    """
    try:
        data: Dict[str, Any] = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigException(f"Invalid TOML in config: {e}")

    default_browser = DEFAULT_BROWSER
    sections: Dict[str, RuleSection] = {}

    for name, table in data.items():
        if name == DEFAULT_SECTION:
            default_browser = _parse_default(table)
        else:
            sections[name] = _parse_section(name, table)

    return Config(default_browser=default_browser, sections=MappingProxyType(sections))


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from disk

    Args:
        path: Config file path (default: config_path())

    Returns:
        Parsed Config

    Raises:
        ConfigException: File unreadable or invalid
    """
    if path is None:
        path = config_path()

    logger = get_logger()
    logger.debug("Loading config from %s", path)

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigException(
            f"Failed to read config at {path}. Set {CONFIG_ENV_VAR} to override. ({e})"
        )

    config = parse_config(text)
    logger.debug("Loaded %d rule section(s): %s",
                 len(config.sections), ", ".join(config.sections) or "none")
    return config
