"""
URL and client matching against configured rule sections
"""

from typing import Mapping, Optional
from urllib.parse import urlsplit, unquote

from .exceptions import InvalidURLException
from .logger import get_logger
from .models import RuleSection


# Schemes that cannot have an empty host
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/<>?@[\\]^|")


def parse_url_host(url: str) -> str:
    """
    Extract the lowercased host from a URL

    Schemeless input such as ``github.com/foo`` is parsed as ``http://``.
    Web URLs follow browser parsing: ``\\`` separates like ``/`` and the
    host is percent-decoded, so ``https://git%68ub.com\\x`` yields
    ``github.com``.

    Args:
        url: URL as given on the command line

    Returns:
        Host, or empty string if the URL has none (e.g. file:///tmp/x)

    Raises:
        InvalidURLException: URL cannot be parsed
    """
    candidate = url if "://" in url else f"http://{url}"
    if candidate.split("://", 1)[0].lower() in _HOST_REQUIRED_SCHEMES:
        candidate = candidate.replace("\\", "/")

    try:
        parts = urlsplit(candidate)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidURLException(f"Invalid URL: {url} ({e})")

    if not parts.scheme:
        raise InvalidURLException(f"Invalid URL: {url}")

    host = unquote(parts.hostname or "").lower()

    if not host and parts.scheme.lower() in _HOST_REQUIRED_SCHEMES:
        raise InvalidURLException(f"Invalid URL: {url} (empty host)")

    if any(c in _FORBIDDEN_HOST_CHARS for c in host):
        raise InvalidURLException(f"Invalid URL: {url} (invalid host)")

    return host


def match_client(client: str,
                 sections: Mapping[str, RuleSection]) -> Optional[RuleSection]:
    """
    Find the first section with a client substring contained in client

    Args:
        client: Detected client name
        sections: Rule sections by name

    Returns:
        Matching section or None
    """
    logger = get_logger()
    logger.debug("Matching client: '%s'", client)

    name = client.lower()
    for section_name, section in sections.items():
        logger.debug("  Checking section '%s' with clients: %s",
                     section_name, section.clients)
        for needle in section.clients:
            if needle and needle.lower() in name:
                logger.info("Client '%s' matched rule '%s' (pattern: '%s')",
                            client, section_name, needle)
                return section

    logger.debug("No client match found for '%s'", client)
    return None


def host_matches(host: str, pattern: str) -> bool:
    """Check exact or subdomain match, case-insensitively"""
    h = host.lower()
    p = pattern.lower()
    if not p:
        return False
    return h == p or h.endswith("." + p)


def match_host(host: str,
               sections: Mapping[str, RuleSection]) -> Optional[RuleSection]:
    """
    Find the first section with a host pattern matching host

    ``github.com`` matches ``github.com`` and ``api.github.com`` but not
    ``notgithub.com``.

    Args:
        host: URL host
        sections: Rule sections by name

    Returns:
        Matching section or None
    """
    logger = get_logger()
    logger.debug("Matching host: '%s'", host)

    for section_name, section in sections.items():
        for pattern in section.url:
            matches = host_matches(host, pattern)
            logger.debug("    Pattern '%s' %s match host '%s'",
                         pattern, "DOES" if matches else "does NOT", host)
            if matches:
                logger.info("Host '%s' matched rule '%s' (pattern: '%s')",
                            host, section_name, pattern)
                return section

    logger.debug("No host match found for '%s'", host)
    return None
