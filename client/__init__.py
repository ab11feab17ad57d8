# client/__init__.py
"""
Python client for the users API: a thin HTTP service plus a list view that
loads and renders users.
"""

from .component import UserListComponent
from .models import User
from .service import UserService

__all__ = ["User", "UserService", "UserListComponent"]
