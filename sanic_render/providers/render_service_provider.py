"""
Render Service Provider
"""
from typing import Any, Dict, Optional
from sanic import Sanic
from sanic_render.service_provider import ServiceProvider
from sanic_render.support import ViewConfig
from sanic_render.view import ViewEngine
from sanic_render.middleware import RenderMiddleware
from sanic_render.exceptions import RenderErrorHandler, RenderException
from sanic_render.logging import getLogger


class RenderServiceProvider(ServiceProvider):
    """
    Service provider for the view engine

    Usage:
        app = Sanic('blog')
        RenderServiceProvider.install(app, {
            'root': 'views',
            'cache': True,        # must be True in production
            'layout': 'layout.html',
            'helpers': {
                'sitename': 'NodeBlog Engine',
                'csrf': lambda request, response: request.ctx.csrf_token,
            },
        })

        @app.get('/')
        async def index(request):
            return await render(request, 'index.html', {'title': 'Index Page'})
    """

    def __init__(
        self,
        app: Sanic,
        config: Optional[ViewConfig] = None,
        options: Optional[Dict[str, Any]] = None,
        debug: bool = False
    ):
        super().__init__(app)
        self.config = config or ViewConfig(**(options or {}))
        self.debug = debug
        self.engine: Optional[ViewEngine] = None
        self.logger = getLogger(__name__)

    def register(self):
        """Register the view engine on the application context"""
        self.engine = ViewEngine(self.config)
        self.app.ctx.view_engine = self.engine

    def boot(self):
        """Attach the engine to requests and report render failures"""
        middleware = RenderMiddleware(self.engine)
        self.app.register_middleware(middleware.before_request, 'request')

        error_handler = RenderErrorHandler(debug=self.debug, include_trace=self.debug)
        self.app.error_handler.add(RenderException, error_handler.handle_error)

        self.logger.debug("View engine ready", extra={'root': str(self.config.root)})

    @classmethod
    def install(
        cls,
        app: Sanic,
        options: Optional[Dict[str, Any]] = None,
        config: Optional[ViewConfig] = None,
        debug: bool = False
    ) -> ViewEngine:
        """Register and boot in one step, returning the engine"""
        provider = cls(app, config=config, options=options, debug=debug)
        provider.register()
        provider.boot()
        return provider.engine
