# errors.py
"""
Errors raised by store operations.

All of them are ValueError subclasses; screens catch InventoryError and
show str(e) to the user.
"""


class InventoryError(ValueError):
    pass


class ValidationError(InventoryError):
    """Missing text or a quantity that is not a valid integer for the operation."""


class DuplicateError(InventoryError):
    pass


class InsufficientStockError(InventoryError):
    def __init__(self, requested: int, available: int):
        super().__init__(f"Insufficient stock (requested: {requested}, current: {available})")
        self.requested = requested
        self.available = available


class ReferentialIntegrityError(InventoryError):
    pass


class NotFoundError(InventoryError):
    pass
