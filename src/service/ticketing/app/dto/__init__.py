"""Application layer DTOs"""

from src.service.ticketing.app.dto.purchase_receipt import PurchaseReceipt

__all__ = ['PurchaseReceipt']
