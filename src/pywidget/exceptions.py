"""Widget exceptions."""
from typing import Dict, Optional


class WidgetError(Exception):
    """Base class for pywidget errors."""


class WidgetConfigError(WidgetError):
    """Raised when a render policy fails validation."""

    def __init__(
        self,
        message: str,
        errors: Optional[Dict[str, str]] = None,
        path: str = "",
    ):
        self.message = message
        self.errors = errors or {}
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        details = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        text = f"{self.message} ({details})" if details else self.message
        if self.path:
            return f"{self.path}: {text}"
        return text


class WidgetRenderError(WidgetError):
    """Raised when a request context is misused during rendering."""
