"""
View Package
Partial expansion, template compilation and layout rendering
"""
from sanic_render.view.engine import ViewEngine
from sanic_render.view.context import build_context
from sanic_render.view.compiler import CompiledTemplate, TemplateCache, TemplateCompiler
from sanic_render.view.partials import PartialExpander
from sanic_render.view.executor import execute

__all__ = [

    # Core
    'ViewEngine',
    'build_context',

    # Pipeline
    'CompiledTemplate',
    'TemplateCache',
    'TemplateCompiler',
    'PartialExpander',
    'execute',
]
