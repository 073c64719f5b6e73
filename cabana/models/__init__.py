"""
Modelos do banco de dados
"""
from .price_item import PriceItem
from .order import Order
from .review import Review
from .ledger_entry import LedgerEntry

__all__ = [
    "PriceItem",
    "Order",
    "Review",
    "LedgerEntry",
]
