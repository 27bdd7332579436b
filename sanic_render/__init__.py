"""
Sanic Render
Views, static partials and layouts for Sanic responses
"""

from sanic_render.helpers import render, view_engine
from sanic_render.support import ViewConfig
from sanic_render.view import ViewEngine
from sanic_render.providers import RenderServiceProvider
from sanic_render.exceptions import (
    RenderException,
    ViewReadError,
    CompileError,
    ExecutionError,
    PartialReadError,
)

__all__ = [
    'render',
    'view_engine',
    'ViewConfig',
    'ViewEngine',
    'RenderServiceProvider',
    'RenderException',
    'ViewReadError',
    'CompileError',
    'ExecutionError',
    'PartialReadError',
]
