"""
hyprchoosy - smart browser chooser for Hyprland

Routes a URL to a browser chosen by the application that asked for it to be
opened, or by the URL host, falling back to a default browser.
"""

__version__ = "0.1.0"

from .models import Config, RuleSection, RoutingDecision
from .exceptions import (
    HyprchoosyException,
    ConfigException,
    InvalidURLException,
    LaunchException,
)
from .config import load_config, parse_config, config_path
from .detection import (
    detect_client,
    detect_from_window_manager,
    detect_from_environment,
    detect_from_process_tree,
    ProcessTable,
)
from .matcher import parse_url_host, match_client, match_host
from .router import choose_browser, route_url
from .browser import launch_browser
from .logger import Logger, LogLevel, get_logger, init_logger

__all__ = [
    "Config",
    "RuleSection",
    "RoutingDecision",
    "HyprchoosyException",
    "ConfigException",
    "InvalidURLException",
    "LaunchException",
    "load_config",
    "parse_config",
    "config_path",
    "detect_client",
    "detect_from_window_manager",
    "detect_from_environment",
    "detect_from_process_tree",
    "ProcessTable",
    "parse_url_host",
    "match_client",
    "match_host",
    "choose_browser",
    "route_url",
    "launch_browser",
    "Logger",
    "LogLevel",
    "get_logger",
    "init_logger",
]
