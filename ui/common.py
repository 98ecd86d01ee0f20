# ui/common.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, simpledialog
from typing import List, Optional

from models import Product, Supplier

NONE_LABEL = "(none)"


def confirm_delete(parent, what: str, title: str = "Confirm") -> bool:
    return messagebox.askyesno(title, f"Remove {what}?", parent=parent)


def header_bar(parent, title: str, on_refresh=None) -> ttk.Frame:
    bar = ttk.Frame(parent)
    bar.pack(fill="x", padx=8, pady=(8, 4))
    ttk.Label(bar, text=title, font=("", 14, "bold")).pack(side="left", padx=4)
    if on_refresh is not None:
        ttk.Button(bar, text="Refresh", command=on_refresh).pack(side="right", padx=4)
    return bar


class ProductSelector(ttk.Frame):
    """
    Read-only dropdown: "CODE | name"
    """
    def __init__(self, parent, store, *, label: str = "Product", width: int = 40):
        super().__init__(parent)
        self.store = store
        self._products: List[Product] = []

        self.var = tk.StringVar(value="")
        ttk.Label(self, text=label).grid(row=0, column=0, sticky="w", padx=4, pady=2)
        self.cb = ttk.Combobox(self, textvariable=self.var, state="readonly", width=width)
        self.cb.grid(row=0, column=1, sticky="w", padx=4, pady=2)
        self.refresh_all()

    def refresh_all(self):
        self._products = list(self.store.products)
        labels = [f"{p.code} | {p.name} ({p.quantity})" for p in self._products]
        current = self.cb.current()
        self.cb["values"] = labels
        if not labels:
            self.var.set("")
        elif 0 <= current < len(labels):
            self.cb.current(current)
        else:
            self.cb.current(0)

    def get_selected(self) -> Optional[Product]:
        idx = self.cb.current()
        if idx < 0 or idx >= len(self._products):
            return None
        return self._products[idx]


class SupplierSelector(ttk.Frame):
    """
    Read-only dropdown with a leading "(none)" entry.
    """
    def __init__(self, parent, store, *, label: str = "Supplier (optional)", width: int = 40):
        super().__init__(parent)
        self.store = store
        self._suppliers: List[Supplier] = []

        self.var = tk.StringVar(value=NONE_LABEL)
        ttk.Label(self, text=label).grid(row=0, column=0, sticky="w", padx=4, pady=2)
        self.cb = ttk.Combobox(self, textvariable=self.var, state="readonly", width=width)
        self.cb.grid(row=0, column=1, sticky="w", padx=4, pady=2)
        self.refresh_all()

    def refresh_all(self):
        selected = self.get_selected()
        self._suppliers = list(self.store.suppliers)
        self.cb["values"] = [NONE_LABEL] + [str(s) for s in self._suppliers]
        self.set_selected(selected)

    def set_selected(self, supplier: Optional[Supplier]):
        for i, s in enumerate(self._suppliers):
            if s is supplier:
                self.cb.current(i + 1)
                return
        self.cb.current(0)

    def get_selected(self) -> Optional[Supplier]:
        idx = self.cb.current()
        if idx <= 0 or idx > len(self._suppliers):
            return None
        return self._suppliers[idx - 1]


class ProductEditDialog(simpledialog.Dialog):
    """Name / preferred supplier editor. `result` is (name, supplier) on OK."""

    def __init__(self, parent, store, product: Product):
        self.store = store
        self.product = product
        super().__init__(parent, title="Edit Product")

    def body(self, master):
        ttk.Label(master, text=f"Code: {self.product.code}").grid(row=0, column=0, columnspan=2, sticky="w", padx=4, pady=2)
        ttk.Label(master, text="Name").grid(row=1, column=0, sticky="w", padx=4, pady=2)
        self.var_name = tk.StringVar(value=self.product.name)
        entry = ttk.Entry(master, textvariable=self.var_name, width=40)
        entry.grid(row=1, column=1, sticky="w", padx=4, pady=2)

        self.sup = SupplierSelector(master, self.store, label="Supplier")
        self.sup.grid(row=2, column=0, columnspan=2, sticky="w")
        self.sup.set_selected(self.product.supplier)
        return entry

    def apply(self):
        self.result = (self.var_name.get().strip(), self.sup.get_selected())
