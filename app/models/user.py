"""
User roles
Users are stored in the `users` collection with a bcrypt password hash.
"""
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"
