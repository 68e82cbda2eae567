"""Errors raised while wiring the application together.

These never describe a domain outcome; they mean the process was started
with a broken environment.
"""


class UtilError(Exception):
    """Base for infrastructure wiring failures."""


class ConfigurationError(UtilError):
    """Settings are inconsistent, e.g. Logfire sending forced on without a token."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""
