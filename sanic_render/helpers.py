"""
Global Helper Functions
Shortcuts for handlers rendering views
"""
from typing import Any, Dict, Optional
from sanic.response import HTTPResponse


def view_engine(request):
    """
    The ViewEngine serving a request

    Looks on request.ctx first (RenderMiddleware) and falls back to the
    application context.
    """
    engine = getattr(request.ctx, 'view_engine', None)
    if engine is None:
        engine = getattr(request.app.ctx, 'view_engine', None)
    if engine is None:
        raise RuntimeError(
            "View engine not initialized. "
            "Install it with RenderServiceProvider.install(app, options)."
        )
    return engine


async def render(
    request,
    view: str,
    options: Optional[Dict[str, Any]] = None,
    response: Optional[HTTPResponse] = None
) -> HTTPResponse:
    """
    Render a view into a response

    Example:
        return await render(request, 'index.html', {'title': 'Index Page'})

        # no layout
        return await render(request, 'blue.html', {'items': items, 'layout': False})
    """
    return await view_engine(request).render(request, view, options, response)
