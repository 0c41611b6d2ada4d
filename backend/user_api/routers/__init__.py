"""
API Routers module.
"""
from user_api.routers import admin, health, users

__all__ = ["admin", "health", "users"]
