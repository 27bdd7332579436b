"""
Service Provider Base Class
Registers services on a Sanic application and bootstraps them
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sanic import Sanic


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Providers are the central place for wiring a package into an app:
    - register() puts services on app.ctx
    - boot() hooks middleware and error handlers once everything is registered
    """

    def __init__(self, app: 'Sanic'):
        self.app = app

    def register(self):
        """
        Register services on the application
        Called when the provider is registered (before booting)
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)
        """
        pass
