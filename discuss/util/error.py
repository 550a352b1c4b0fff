"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings are unusable in the current environment."""


class JWTError(UtilError):
    """Access token is malformed, badly signed or expired."""
