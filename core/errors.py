"""Exception hierarchy for the research assistant.

    ResearchAssistantError
    ├── DocumentReadError      - uploaded file could not be read as text
    ├── InvalidRiskFactorError - factor outside the 0-100 integer range
    └── ConfigurationError     - bad value in secrets / environment
"""

from typing import Any, Optional


class ResearchAssistantError(Exception):
    """Base class for errors raised by this app.

    Attributes:
        message: Human-readable description, safe to show in the UI.
        context: Extra details (file names, field names) for logging.
    """

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class DocumentReadError(ResearchAssistantError):
    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message, filename=filename)
        self.filename = filename


class InvalidRiskFactorError(ResearchAssistantError, ValueError):
    def __init__(self, factor: str, value: Any):
        super().__init__(
            f"{factor} must be an integer between 0 and 100",
            factor=factor,
            value=value,
        )
        self.factor = factor
        self.value = value


class ConfigurationError(ResearchAssistantError):
    pass
