"""
API Routers module.
"""
from userpanel.routers import auth, control, health

__all__ = ["auth", "control", "health"]
