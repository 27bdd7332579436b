from sanic_render.http.response_helper import ResponseHelper, emit

__all__ = [
    'ResponseHelper',
    'emit',
]
