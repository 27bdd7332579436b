"""
Render Executor
"""
from typing import Any, Dict, Optional
from sanic_render.exceptions import ExecutionError
from sanic_render.view.compiler import CompiledTemplate

# Local receiving the optional ``scope`` object
SCOPE_KEY = 'scope'
RECEIVER_KEY = 'this'


def execute(template: CompiledTemplate, locals: Dict[str, Any], view: Optional[str] = None) -> str:
    """
    Run a compiled template against locals

    When locals carry a ``scope`` object it is also exposed to the
    template as ``this``. Anything the template raises is wrapped in
    ExecutionError with the original error attached.
    """
    context = dict(locals)
    if context.get(SCOPE_KEY) is not None:
        context[RECEIVER_KEY] = context[SCOPE_KEY]

    view = view or template.name
    try:
        return template(context)
    except Exception as e:
        raise ExecutionError(f"Error rendering view {view}: {e}", view=view, original=e) from e
