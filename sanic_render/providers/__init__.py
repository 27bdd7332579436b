from sanic_render.providers.render_service_provider import RenderServiceProvider

__all__ = [
    'RenderServiceProvider',
]
