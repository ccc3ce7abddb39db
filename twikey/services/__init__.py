"""Typed facades over the Twikey resource endpoints."""

from .base import FeedService
from .invoices import InvoiceService
from .mandates import MandateService
from .paylinks import PaylinkService
from .transactions import TransactionService

__all__ = [
    "FeedService",
    "InvoiceService",
    "MandateService",
    "PaylinkService",
    "TransactionService",
]
