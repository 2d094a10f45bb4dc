"""SQLAlchemy models exposed for table creation and imports."""
from .product import Product
from .user import User

__all__ = ["User", "Product"]
