"""
Browser launching
"""

import shlex
import subprocess
from typing import List

from .exceptions import LaunchException
from .logger import get_logger


def browser_argv(browser: str, url: str) -> List[str]:
    """Split a browser command line and append the URL"""
    try:
        argv = shlex.split(browser)
    except ValueError as e:
        raise LaunchException(f"Invalid browser command '{browser}': {e}")
    if not argv:
        raise LaunchException("Browser command is empty")
    return argv + [url]


def launch_browser(browser: str, url: str) -> None:
    """
    Spawn browser with url, detached from our session

    The child gets /dev/null for its standard streams and a new session so
    it keeps running after hyprchoosy exits.

    Args:
        browser: Browser command, optionally with arguments
        url: URL argument

    Raises:
        LaunchException: Browser could not be spawned
    """
    logger = get_logger()
    logger.info("Launching browser: '%s' with URL: '%s'", browser, url)

    argv = browser_argv(browser, url)

    try:
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as e:
        logger.warning("Failed to spawn browser '%s': %s", browser, e)
        raise LaunchException(f"Failed to spawn browser '{browser}': {e}")

    logger.info("Successfully spawned browser '%s'", browser)
