"""
View Engine
Renders views, wraps them in layouts and writes the response
"""
from typing import Optional, Dict, Any, Union
from sanic.response import HTTPResponse
from sanic_render.http import ResponseHelper
from sanic_render.logging import getLogger
from sanic_render.support import ViewConfig
from sanic_render.view.compiler import TemplateCache, TemplateCompiler
from sanic_render.view.context import build_context
from sanic_render.view.executor import execute


class ViewEngine:
    """
    Render service held by the request-handling layer

    One engine owns one configuration and one template cache. Handlers
    call ``await engine.render(request, 'index.html', {...})`` and return
    the response. Any render failure is raised (RenderException subclasses)
    so Sanic's error handlers report it; nothing is written in that case.

    Example:
        engine = ViewEngine(ViewConfig(root='views', layout='layout.html'))

        @app.get('/')
        async def index(request):
            return await engine.render(request, 'index.html', {'name': 'Ann'})

        # no layout
        await engine.render(request, 'blue.html', {'layout': False})
    """

    def __init__(self, config: Optional[ViewConfig] = None, **options: Any):
        """
        Initialize view engine with configuration

        Args:
            config: View configuration (built from options when omitted)
            **options: Configuration keys, see ViewConfig
        """
        if config is None:
            config = ViewConfig(**options)
        elif options:
            config.configure(options)

        self.config = config
        self.cache = TemplateCache()
        self.compiler = TemplateCompiler(config, self.cache)
        self.logger = getLogger(__name__)

    async def render(
        self,
        request,
        view: str,
        options: Optional[Dict[str, Any]] = None,
        response: Optional[HTTPResponse] = None
    ) -> HTTPResponse:
        """
        Render a view (and its layout) into an HTTP response

        Args:
            request: Current Sanic request (exposed to templates as ``request``)
            view: View name relative to the view root
            options: Template locals; ``layout`` picks or disables the layout
            response: Response to write into (a new HTTPResponse when None)

        Returns:
            The response with body, Content-Type and Content-Length set

        Raises:
            ViewReadError, CompileError, ExecutionError
        """
        if response is None:
            response = HTTPResponse()

        content = await self.render_to_string(view, options, request=request, response=response)
        return ResponseHelper.emit(response, content)

    async def render_to_string(
        self,
        view: str,
        options: Optional[Dict[str, Any]] = None,
        request=None,
        response=None
    ) -> str:
        """
        Render a view and its layout without touching a response
        """
        from sanic_render.defaults import LAYOUT_BODY_KEY

        options = options or {}
        template_context = build_context(self.config, request, response, options, view=view)

        content = await self.render_view(view, template_context)

        layout = self.resolve_layout(options)
        if not layout:
            return content

        # Render layout template with the view output as its body
        template_context[LAYOUT_BODY_KEY] = content
        return await self.render_view(layout, template_context)

    async def render_view(self, view: str, template_context: Dict[str, Any]) -> str:
        """Resolve and execute a single view, no layout"""
        template = await self.compiler.resolve(view, template_context)
        self.logger.debug("Rendering view %s", template.name, extra={'view': template.name})
        return execute(template, template_context)

    def resolve_layout(self, options: Dict[str, Any]) -> Union[str, None]:
        """
        Layout that applies to a render, or None

        A string ``layout`` option wins over the configured layout; False
        or an empty string disables layouts for this render.
        """
        requested = options.get('layout')
        if isinstance(requested, str):
            return requested or None
        if 'layout' in options and requested is not None and not requested:
            return None

        layout = self.config.layout
        return layout if isinstance(layout, str) and layout else None

    def clear_cache(self):
        """
        Forget compiled templates so edited views are read again

        Meant for development; production runs assume view files never
        change while the process is alive.
        """
        self.cache.clear()
