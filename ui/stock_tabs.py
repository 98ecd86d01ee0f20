# ui/stock_tabs.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox

from errors import InventoryError
from ui.common import ProductSelector, SupplierSelector, header_bar

logger = logging.getLogger(__name__)


class _MovementFrame(ttk.Frame):
    """Shared form: product, amount, note. Subclasses add fields and submit."""

    title = ""
    button_text = ""

    def __init__(self, parent, store, tabs=None):
        super().__init__(parent)
        self.store = store
        self.tabs = tabs

        header_bar(self, self.title)

        self.box = ttk.LabelFrame(self, text=self.title)
        self.box.pack(fill="x", padx=8, pady=8)

        self.var_amount = tk.StringVar(value="1")
        self.var_note = tk.StringVar(value="")

        self.selector = ProductSelector(self.box, store)
        self.selector.grid(row=0, column=0, columnspan=2, sticky="w")

        ttk.Label(self.box, text="Quantity").grid(row=2, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(self.box, textvariable=self.var_amount, width=12).grid(row=2, column=1, sticky="w", padx=4, pady=2)

        ttk.Label(self.box, text="Note").grid(row=3, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(self.box, textvariable=self.var_note, width=40).grid(row=3, column=1, sticky="w", padx=4, pady=2)

        btns = ttk.Frame(self)
        btns.pack(fill="x", padx=8, pady=(0, 8))
        ttk.Button(btns, text=self.button_text, command=self.on_apply).pack(side="right", padx=4)
        ttk.Button(btns, text="Reset", command=self.on_reset).pack(side="right", padx=4)

    def on_reset(self):
        self.var_amount.set("1")
        self.var_note.set("")

    def submit(self, product):
        raise NotImplementedError

    def on_apply(self):
        p = self.selector.get_selected()
        if p is None:
            messagebox.showwarning("Stock", "Select a product", parent=self)
            return
        try:
            self.submit(p)
        except InventoryError as e:
            logger.warning("%s rejected for %s: %s", self.title, p.code, e)
            messagebox.showerror("Error", str(e), parent=self)
            return
        messagebox.showinfo("Stock", f"{self.title} registered. Current quantity: {p.quantity}", parent=self)
        self.on_reset()
        if self.tabs is not None:
            self.tabs.refresh_all()
        else:
            self.refresh()

    def refresh(self):
        self.selector.refresh_all()


class StockInFrame(_MovementFrame):
    title = "Stock In"
    button_text = "Register Entry"

    def __init__(self, parent, store, tabs=None):
        super().__init__(parent, store, tabs)
        self.supplier = SupplierSelector(self.box, store)
        self.supplier.grid(row=1, column=0, columnspan=2, sticky="w")

    def submit(self, product):
        self.store.stock_in(product, self.supplier.get_selected(), self.var_amount.get(), self.var_note.get())

    def refresh(self):
        super().refresh()
        self.supplier.refresh_all()


class StockOutFrame(_MovementFrame):
    title = "Stock Out"
    button_text = "Register Exit"

    def submit(self, product):
        self.store.stock_out(product, self.var_amount.get(), self.var_note.get())
