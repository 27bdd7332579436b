"""
Framework Support Classes
"""

from sanic_render.support.env_helper import EnvHelper
from sanic_render.support.config import ViewConfig

__all__ = [
    'EnvHelper',
    'ViewConfig',
]
