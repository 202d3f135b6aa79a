"""Errors raised outside the domain: settings, wiring and scripts."""


class UtilError(Exception):
    """Base for non-domain failures."""


class ConfigurationError(UtilError):
    """Settings or an input file the process depends on are unusable."""


class DependencyInjectionError(UtilError):
    """A provider cannot be resolved to an implementation."""
