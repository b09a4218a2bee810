"""
Data models for routing rules
"""

from dataclasses import dataclass, field
from typing import Tuple, Mapping, Optional


DEFAULT_BROWSER = "firefox"


@dataclass(frozen=True)
class RuleSection:
    """Named rule group mapping clients and hosts to one browser"""
    name: str
    browser: str
    clients: Tuple[str, ...] = ()
    url: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Config:
    """Loaded configuration: default browser plus rule sections in file order"""
    default_browser: str = DEFAULT_BROWSER
    sections: Mapping[str, RuleSection] = field(default_factory=dict)


@dataclass(frozen=True)
class RoutingDecision:
    """Outcome of routing one URL"""
    browser: str
    reason: str
    section: Optional[str] = None
    client: Optional[str] = None
    host: str = ""
