"""Exceptions raised by ghext"""


class GhextError(Exception):
    """Base class for ghext errors"""


class ConfigError(GhextError):
    """Configuration is missing or can't be used"""
