"""
View Context Builder
Assembles the locals map for one render
"""
from typing import Optional, Dict, Any
from sanic_render.exceptions import ExecutionError
from sanic_render.support import ViewConfig


def build_context(
    config: ViewConfig,
    request=None,
    response=None,
    context: Optional[Dict[str, Any]] = None,
    view: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build complete template context

    Precedence, lowest first:
        helpers   only fill names the caller did not pass; callable
                  helpers are factories called as helper(request, response)
        context   caller supplied options
        filters   always overwrite
        request   added unless the caller passed one

    Args:
        config: View configuration holding filters and helpers
        request: Sanic request object
        response: Response the render will be emitted to
        context: User-provided context
        view: View being rendered (for error reports)
    Returns:
        Complete context dictionary

    Raises:
        ExecutionError: a helper factory raised
    """
    template_context = {}

    # User context
    template_context.update(context or {})

    # Helpers
    for name, helper in config.helpers.items():
        if name in template_context:
            continue
        if callable(helper):
            try:
                helper = helper(request, response)
            except Exception as e:
                raise ExecutionError(
                    f"Helper {name!r} failed: {e}", view=view, original=e
                ) from e
        template_context[name] = helper

    # Filters
    template_context.update(config.filters)

    if template_context.get('request') is None:
        template_context['request'] = request

    return template_context
