"""Route modules for the Stockroom API."""
from . import auth, health, products, users

__all__ = ["auth", "health", "users", "products"]
