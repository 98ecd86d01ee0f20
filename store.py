# store.py
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional, Union

from errors import (
    DuplicateError,
    InsufficientStockError,
    NotFoundError,
    ReferentialIntegrityError,
    ValidationError,
)
from models import MovementType, Product, StockMovement, Supplier
from utils import now, parse_int, parse_positive_int

logger = logging.getLogger(__name__)

ProductRef = Union[Product, str]
SupplierRef = Union[Supplier, str, None]

NOTE_INITIAL_BALANCE = "initial balance"
NOTE_MANUAL_ENTRY = "manual entry"
NOTE_MANUAL_EXIT = "manual exit"


class InventoryStore:
    def __init__(self, seed: bool = True, clock: Callable[[], datetime] = now):
        self.clock = clock
        self.products: List[Product] = []
        self.suppliers: List[Supplier] = []
        self.movements: List[StockMovement] = []
        if seed:
            self._seed()

    # -------------------------
    # Internal
    # -------------------------
    def _seed(self) -> None:
        ts = self.clock()
        s1 = Supplier("Supplier A", "contact@sa.com")
        s2 = Supplier("Supplier B", "contact@sb.com")
        self.suppliers.extend([s1, s2])

        p1 = Product("P001", "Screw 4mm", s1, 100)
        p2 = Product("P002", "Nut 4mm", s1, 200)
        p3 = Product("P003", "Arduino Board", s2, 15)
        self.products.extend([p1, p2, p3])

        self.movements.extend([
            StockMovement(p1, 50, MovementType.IN, ts - timedelta(days=5), s1, "initial entry"),
            StockMovement(p2, 200, MovementType.IN, ts - timedelta(days=10), s1, "initial purchase"),
            StockMovement(p3, 5, MovementType.OUT, ts - timedelta(days=1), None, "sale"),
        ])
        logger.debug(
            "seeded %d suppliers, %d products, %d movements",
            len(self.suppliers), len(self.products), len(self.movements),
        )

    def _resolve_product(self, product: ProductRef) -> Product:
        if isinstance(product, Product):
            if not any(p is product for p in self.products):
                raise NotFoundError(f"Product not found: {product.code}")
            return product
        return self.get_product(product)

    def _resolve_supplier(self, supplier: SupplierRef) -> Optional[Supplier]:
        if supplier is None:
            return None
        if isinstance(supplier, Supplier):
            if not any(s is supplier for s in self.suppliers):
                raise NotFoundError(f"Supplier not found: {supplier.name}")
            return supplier
        return self.get_supplier(supplier)

    def _append_movement(self, product: Product, amount: int, kind: MovementType,
                         supplier: Optional[Supplier], note: str) -> StockMovement:
        m = StockMovement(product, amount, kind, self.clock(), supplier, note)
        self.movements.append(m)
        return m

    # -------------------------
    # Read helpers
    # -------------------------
    def find_product_by_code(self, code: str) -> Optional[Product]:
        key = (code or "").casefold()
        for p in self.products:
            if p.code.casefold() == key:
                return p
        return None

    def find_supplier_by_name(self, name: str) -> Optional[Supplier]:
        key = (name or "").casefold()
        for s in self.suppliers:
            if s.name.casefold() == key:
                return s
        return None

    def get_product(self, code: str) -> Product:
        p = self.find_product_by_code(code)
        if p is None:
            raise NotFoundError(f"Product not found: {code}")
        return p

    def get_supplier(self, name: str) -> Supplier:
        s = self.find_supplier_by_name(name)
        if s is None:
            raise NotFoundError(f"Supplier not found: {name}")
        return s

    def movements_of(self, product: Product) -> List[StockMovement]:
        return [m for m in self.movements if m.product is product]

    def is_supplier_in_use(self, supplier: Supplier) -> bool:
        return any(p.supplier is supplier for p in self.products)

    # -------------------------
    # Products
    # -------------------------
    def register_product(self, code: str, name: str, supplier: SupplierRef = None,
                         initial_qty: Any = 0) -> Product:
        code = (code or "").strip()
        name = (name or "").strip()
        if not code or not name:
            raise ValidationError("Code and name are required")
        qty = parse_int(initial_qty, "Initial quantity")
        if qty < 0:
            raise ValidationError("Initial quantity cannot be negative")
        if self.find_product_by_code(code) is not None:
            raise DuplicateError(f"A product with code {code} already exists")
        sup = self._resolve_supplier(supplier)

        p = Product(code, name, sup, qty)
        self.products.append(p)
        if qty > 0:
            self._append_movement(p, qty, MovementType.IN, sup, NOTE_INITIAL_BALANCE)
        logger.info("product registered: %s (qty=%d)", code, qty)
        return p

    def edit_product(self, product: ProductRef, new_name: str, new_supplier: SupplierRef = None) -> Product:
        p = self._resolve_product(product)
        p.name = (new_name or "").strip()
        p.supplier = self._resolve_supplier(new_supplier)
        logger.info("product updated: %s", p.code)
        return p

    def delete_product(self, product: ProductRef) -> None:
        p = self._resolve_product(product)
        before = len(self.movements)
        self.movements = [m for m in self.movements if m.product is not p]
        self.products = [x for x in self.products if x is not p]
        logger.info("product deleted: %s (%d movements removed)", p.code, before - len(self.movements))

    # -------------------------
    # Inventory movements
    # -------------------------
    def stock_in(self, product: ProductRef, supplier: SupplierRef = None, amount: Any = None,
                 note: str = "") -> StockMovement:
        p = self._resolve_product(product)
        sup = self._resolve_supplier(supplier)
        qty = parse_positive_int(amount)

        p.quantity += qty
        m = self._append_movement(p, qty, MovementType.IN, sup, (note or "").strip() or NOTE_MANUAL_ENTRY)
        logger.info("stock in: %s +%d -> %d", p.code, qty, p.quantity)
        return m

    def stock_out(self, product: ProductRef, amount: Any, note: str = "") -> StockMovement:
        p = self._resolve_product(product)
        qty = parse_positive_int(amount)
        if qty > p.quantity:
            raise InsufficientStockError(qty, p.quantity)

        p.quantity -= qty
        m = self._append_movement(p, qty, MovementType.OUT, None, (note or "").strip() or NOTE_MANUAL_EXIT)
        logger.info("stock out: %s -%d -> %d", p.code, qty, p.quantity)
        return m

    # -------------------------
    # Suppliers
    # -------------------------
    def add_supplier(self, name: str, contact: str = "") -> Supplier:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Supplier name is required")
        s = Supplier(name, (contact or "").strip())
        self.suppliers.append(s)
        logger.info("supplier added: %s", name)
        return s

    def update_supplier(self, supplier: SupplierRef, name: str, contact: str) -> Supplier:
        s = self._resolve_supplier(supplier)
        if s is None:
            raise NotFoundError("Select a supplier")
        s.name = (name or "").strip()
        s.contact = (contact or "").strip()
        logger.info("supplier updated: %s", s.name)
        return s

    def delete_supplier(self, supplier: SupplierRef) -> None:
        s = self._resolve_supplier(supplier)
        if s is None:
            raise NotFoundError("Select a supplier")
        if self.is_supplier_in_use(s):
            raise ReferentialIntegrityError(f"Cannot delete {s.name}: supplier is linked to products")
        self.suppliers = [x for x in self.suppliers if x is not s]
        logger.info("supplier deleted: %s", s.name)
