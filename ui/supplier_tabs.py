# ui/supplier_tabs.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import List, Optional

from errors import InventoryError
from models import Supplier
from ui.common import confirm_delete, header_bar

logger = logging.getLogger(__name__)


class SuppliersFrame(ttk.Frame):
    def __init__(self, parent, store, tabs=None):
        super().__init__(parent)
        self.store = store
        self.tabs = tabs
        self._rows: List[Supplier] = []

        header_bar(self, "Suppliers", on_refresh=self.refresh)

        frm = ttk.LabelFrame(self, text="Supplier")
        frm.pack(fill="x", padx=8, pady=8)

        self.var_name = tk.StringVar()
        self.var_contact = tk.StringVar()

        ttk.Label(frm, text="Name").grid(row=0, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(frm, textvariable=self.var_name, width=30).grid(row=0, column=1, sticky="w", padx=4, pady=2)
        ttk.Label(frm, text="Contact").grid(row=0, column=2, sticky="w", padx=4, pady=2)
        ttk.Entry(frm, textvariable=self.var_contact, width=30).grid(row=0, column=3, sticky="w", padx=4, pady=2)

        ops = ttk.Frame(frm)
        ops.grid(row=1, column=0, columnspan=4, sticky="w", padx=4, pady=4)
        ttk.Button(ops, text="Add", command=self.on_add).pack(side="left", padx=4)
        ttk.Button(ops, text="Update", command=self.on_update).pack(side="left", padx=4)
        ttk.Button(ops, text="Delete", command=self.on_delete).pack(side="left", padx=4)
        ttk.Button(ops, text="Clear", command=self.on_reset).pack(side="left", padx=4)

        table = ttk.LabelFrame(self, text="Supplier list (select to edit)")
        table.pack(fill="both", expand=True, padx=8, pady=8)

        cols = ("name", "contact", "products")
        self.tree = ttk.Treeview(table, columns=cols, show="headings", height=16, selectmode="browse")
        for c, w, t in [("name", 220, "Name"), ("contact", 260, "Contact"), ("products", 90, "Products")]:
            self.tree.heading(c, text=t)
            self.tree.column(c, width=w, anchor="w")
        self.tree.pack(fill="both", expand=True, padx=4, pady=4)
        self.tree.bind("<<TreeviewSelect>>", self.on_select)

        self.refresh()

    def _selected(self) -> Optional[Supplier]:
        sel = self.tree.selection()
        if not sel:
            return None
        idx = self.tree.index(sel[0])
        return self._rows[idx] if idx < len(self._rows) else None

    def on_reset(self):
        self.var_name.set("")
        self.var_contact.set("")
        self.tree.selection_remove(*self.tree.selection())

    def on_select(self, _e=None):
        s = self._selected()
        if s is None:
            return
        self.var_name.set(s.name)
        self.var_contact.set(s.contact)

    def _run(self, action, done_msg: str) -> bool:
        try:
            action()
        except InventoryError as e:
            logger.warning("supplier operation rejected: %s", e)
            messagebox.showerror("Error", str(e), parent=self)
            return False
        messagebox.showinfo("Suppliers", done_msg, parent=self)
        if self.tabs is not None:
            self.tabs.refresh_all()
        else:
            self.refresh()
        return True

    def on_add(self):
        if self._run(lambda: self.store.add_supplier(self.var_name.get(), self.var_contact.get()), "Supplier added"):
            self.on_reset()

    def on_update(self):
        s = self._selected()
        if s is None:
            messagebox.showwarning("Suppliers", "Select a supplier", parent=self)
            return
        self._run(lambda: self.store.update_supplier(s, self.var_name.get(), self.var_contact.get()), "Supplier updated")

    def on_delete(self):
        s = self._selected()
        if s is None:
            messagebox.showwarning("Suppliers", "Select a supplier", parent=self)
            return
        if not confirm_delete(self, f"supplier {s.name}"):
            return
        if self._run(lambda: self.store.delete_supplier(s), "Supplier deleted"):
            self.on_reset()

    def refresh(self):
        self.tree.delete(*self.tree.get_children())
        self._rows = list(self.store.suppliers)
        for s in self._rows:
            used = sum(1 for p in self.store.products if p.supplier is s)
            self.tree.insert("", "end", values=(s.name, s.contact, used))
