from sanic_render.middleware.base_middleware import Middleware
from sanic_render.middleware.render_middleware import RenderMiddleware

__all__ = [
    'Middleware',
    'RenderMiddleware',
]
