"""
Exceptions raised by hyprchoosy
"""


class HyprchoosyException(Exception):
    """Base exception for hyprchoosy errors"""
    pass


class ConfigException(HyprchoosyException):
    """Configuration file could not be read or is malformed"""
    pass


class InvalidURLException(HyprchoosyException):
    """URL argument could not be parsed"""
    pass


class LaunchException(HyprchoosyException):
    """Browser process could not be spawned"""
    pass
