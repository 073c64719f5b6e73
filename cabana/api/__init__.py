"""
APIs REST
"""
from .auth import bp as auth_bp
from .orders import bp as orders_bp
from .reviews import bp as reviews_bp
from .prices import bp as prices_bp
from .finance import bp as finance_bp
from .gallery import bp as gallery_bp

__all__ = [
    "auth_bp",
    "orders_bp",
    "reviews_bp",
    "prices_bp",
    "finance_bp",
    "gallery_bp",
]
