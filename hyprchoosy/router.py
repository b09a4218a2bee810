"""
Routing policy: pick a browser for a URL
"""

from typing import Callable, Optional

from .config import load_config
from .detection import detect_client
from .logger import get_logger
from .matcher import parse_url_host, match_client, match_host
from .models import Config, RoutingDecision


REASON_CLIENT = "client"
REASON_HOST = "host"
REASON_DEFAULT = "default"


def choose_browser(host: str, config: Config,
                   client: Optional[str] = None) -> RoutingDecision:
    """
    Choose a browser for host, given the detected client

    Priority: client rule, then host rule, then the default browser.

    Args:
        host: Lowercased URL host (may be empty)
        config: Loaded configuration
        client: Detected client name, if any

    Returns:
        RoutingDecision carrying exactly one browser command
    """
    logger = get_logger()

    if client:
        section = match_client(client, config.sections)
        if section is not None:
            return RoutingDecision(browser=section.browser, reason=REASON_CLIENT,
                                   section=section.name, client=client, host=host)

    section = match_host(host, config.sections)
    if section is not None:
        return RoutingDecision(browser=section.browser, reason=REASON_HOST,
                               section=section.name, client=client, host=host)

    logger.info("No rule matched, using default browser '%s'", config.default_browser)
    return RoutingDecision(browser=config.default_browser, reason=REASON_DEFAULT,
                           client=client, host=host)


def route_url(url: str, config: Optional[Config] = None,
              detect: Callable[[], Optional[str]] = detect_client) -> RoutingDecision:
    """
    Route a URL end to end

    Args:
        url: URL to open
        config: Configuration (default: load_config())
        detect: Client detection chain

    Returns:
        RoutingDecision

    Raises:
        InvalidURLException: URL cannot be parsed
        ConfigException: Configuration cannot be loaded
    """
    if config is None:
        config = load_config()

    host = parse_url_host(url)
    client = detect()

    decision = choose_browser(host, config, client)
    get_logger().info("Routing '%s' to '%s' (%s)", url, decision.browser, decision.reason)
    return decision
