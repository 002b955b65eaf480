# solanawiz/errors.py — error taxonomy


class SolanaWizError(Exception):
    """Base class for application errors."""


class ConfigurationError(SolanaWizError):
    """A required setting (e.g. the OKX API key) is missing."""


class UpstreamHTTPError(SolanaWizError):
    """The OKX API could not be reached or answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamParseError(SolanaWizError):
    """The OKX API answered with a body that is not valid JSON."""


class GenerationError(SolanaWizError):
    """The text-generation call failed or returned output that breaks its schema."""
