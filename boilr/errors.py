# boilr/errors.py
"""
Error hierarchy for boilr.

Every error carries a human-readable message that the CLI prints verbatim
before exiting with a non-zero status.
"""

from typing import Any


class BoilrError(Exception):
    """Base class for all user-facing boilr errors."""


class ConfigError(BoilrError):
    """Configuration file is absent, malformed, or incomplete."""


class ConfigMissingError(ConfigError):
    """No configuration file at the expected path."""


class ConfigInvalidError(ConfigError):
    """Configuration file exists but lacks required fields."""


class CredentialMissingError(ConfigError):
    """The selected provider has no stored API key."""


class SchemaValidationError(BoilrError):
    """A value did not match the abstract schema shape."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ProviderError(BoilrError):
    """A call to the LLM provider failed."""

    def __init__(self, message: str, provider: str | None = None, operation: str | None = None):
        super().__init__(message)
        self.provider = provider
        self.operation = operation


class AuthenticationError(ProviderError):
    """Provider rejected the API key."""


class RateLimitError(ProviderError):
    """Provider is throttling requests."""


class ProviderCallError(ProviderError):
    """Any other transport or model failure."""
