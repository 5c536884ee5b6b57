"""
Shared FastAPI dependencies.

The service instances are built once in ``main.create_app`` and kept on
``app.state``.  Route handlers obtain them through the functions in
this module so that tests can swap in a service with its own store.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` attached to the running application."""
    return request.app.state.user_service
