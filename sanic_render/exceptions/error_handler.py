"""
Centralized Render Error Handler
"""
from sanic_render.logging import getLogger
import traceback
from typing import Dict, Any
from sanic import Request
from sanic.response import text
from sanic.exceptions import SanicException


class RenderErrorHandler:
    """
    Turns render failures forwarded to Sanic's error channel into responses

    The render pipeline never writes an error body itself; it raises and
    this handler (registered by RenderServiceProvider) reports it.
    """
    def __init__(self, debug: bool = False, include_trace: bool = False):
        """
        Initialize error handler
        Args:
            debug: Enable debug mode (expose error messages)
            include_trace: Include stack trace in error response (only in debug)
        """
        self.debug = debug
        self.include_trace = include_trace and debug
        self.logger = getLogger('sanic_render.errors')

    async def handle_error(self, request: Request, error: Exception):
        """
        Handle error and return a plain text response
        """
        status_code = self._get_status_code(error)

        self._log_error(error, request, status_code)

        body = self._get_error_message(error)
        if self.include_trace:
            body += '\n\n' + ''.join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )

        return text(body, status=status_code)

    def _get_error_message(self, error: Exception) -> str:
        """
        Get user-friendly error message
        """
        if isinstance(error, SanicException):
            return str(error)

        # Default message in production (don't expose internals)
        if not self.debug:
            return "An error occurred while processing your request"

        message = getattr(error, 'message', None) or str(error)
        original = getattr(error, 'original', None)
        if original is not None:
            message = f"{message}: {original}"
        return message

    def _get_status_code(self, error: Exception) -> int:
        """
        Determine HTTP status code from error
        """
        if isinstance(error, SanicException):
            return error.status_code

        if hasattr(error, 'status_code'):
            return error.status_code

        return 500

    def _log_context(self, error: Exception, request: Request, status_code: int) -> Dict[str, Any]:
        return {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'view': getattr(error, 'view', None),
            'status_code': status_code,
            'method': request.method,
            'path': request.path,
        }

    def _log_error(
        self,
        error: Exception,
        request: Request,
        status_code: int
    ):
        """
        Log error with request context
        """
        log_data = self._log_context(error, request, status_code)

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=error
            )
        else:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
