"""Errors raised while validating a simulation before it starts."""


class ConfigurationError(ValueError):
    """Invalid simulation configuration. A misconfigured simulation must not start."""
