"""
Render Middleware
Hands the view engine to every request
"""
from sanic import Request
from sanic_render.middleware.base_middleware import Middleware
from sanic_render.view import ViewEngine


class RenderMiddleware(Middleware):
    """Expose the application's ViewEngine as request.ctx.view_engine"""

    CONTEXT_KEY = 'view_engine'

    def __init__(self, engine: ViewEngine):
        self.engine = engine

    async def before_request(self, request: Request):
        setattr(request.ctx, self.CONTEXT_KEY, self.engine)
        return None
