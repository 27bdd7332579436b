"""
Exceptions Package
Render pipeline errors and their reporting
"""
from sanic_render.exceptions.custom import (
    FrameworkException,
    RenderException,
    ViewReadError,
    CompileError,
    ExecutionError,
    PartialReadError,
)
from sanic_render.exceptions.error_handler import RenderErrorHandler

__all__ = [
    # Error handling
    'RenderErrorHandler',

    # Custom exceptions
    'FrameworkException',
    'RenderException',
    'ViewReadError',
    'CompileError',
    'ExecutionError',
    'PartialReadError',
]
