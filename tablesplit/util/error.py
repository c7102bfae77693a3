"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings can't be used in the current environment.

    Raised at container build time, e.g. when production still carries a
    placeholder secret.
    """

    pass
