"""
Users API package.

Contains the user registration routes, mounted under /users.
"""

from src.api.users.routes import router

__all__ = ["router"]
