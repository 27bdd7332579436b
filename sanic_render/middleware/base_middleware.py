"""
Base Middleware Class
Abstract base class for all middlewares
"""
from abc import ABC, abstractmethod
from sanic import Request


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach routes
    - Short-circuit requests (return response early)
    """

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Args:
            request: The Sanic request object

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass
