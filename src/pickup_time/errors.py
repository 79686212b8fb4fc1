"""Custom exception types for the GitHub PR pickup-time generator."""


class PickupTimeError(Exception):
    """Base exception for all recoverable pickup-time errors."""


class ConfigurationError(PickupTimeError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(PickupTimeError):
    """Raised when GitHub authentication credentials are unavailable or rejected."""


class ApiError(PickupTimeError):
    """Raised when a GitHub API request fails or returns an unexpected response."""


class DataValidationError(PickupTimeError):
    """Raised when pull request or event data is missing required timestamps."""
