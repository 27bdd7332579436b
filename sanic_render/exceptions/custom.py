"""
Custom Exception Classes
Render pipeline exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class RenderException(FrameworkException):
    """
    Base class for render pipeline failures

    Carries the view being rendered and the underlying error (also chained
    as __cause__ when raised with ``from``).
    """
    status_code = 500
    message = "Error rendering view"

    def __init__(
        self,
        message: Optional[str] = None,
        view: Optional[str] = None,
        original: Optional[BaseException] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, status_code)
        self.view = view
        self.original = original


class ViewReadError(RenderException):
    """
    A view or layout file cannot be read

    Example:
        raise ViewReadError("Cannot read view", view='missing.html', original=e)
    """
    message = "View file cannot be read"


class CompileError(RenderException):
    """
    The template engine rejected the expanded template source
    """
    message = "Template compilation failed"


class ExecutionError(RenderException):
    """
    The compiled template raised while producing output
    """
    message = "Template execution failed"


class PartialReadError(RenderException):
    """
    A referenced partial cannot be read

    Never raised out of a page render: the expander logs it and substitutes
    an empty string for the include.
    """
    message = "Partial view cannot be read"
