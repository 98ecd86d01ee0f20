# ui/product_tabs.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import List, Optional
from datetime import datetime, timedelta

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from errors import InventoryError
from models import Product
from reports import product_detail, stock_level_series
from utils import parse_date_yyyy_mm_dd
from ui.common import ProductEditDialog, ProductSelector, SupplierSelector, confirm_delete, header_bar

logger = logging.getLogger(__name__)


class ProductRegisterFrame(ttk.Frame):
    def __init__(self, parent, store, tabs=None):
        super().__init__(parent)
        self.store = store
        self.tabs = tabs

        header_bar(self, "Product Registration")

        frm = ttk.LabelFrame(self, text="New product")
        frm.pack(fill="x", padx=8, pady=8)

        self.var_code = tk.StringVar()
        self.var_name = tk.StringVar()
        self.var_qty = tk.StringVar(value="0")

        ttk.Label(frm, text="Code").grid(row=0, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(frm, textvariable=self.var_code, width=20).grid(row=0, column=1, sticky="w", padx=4, pady=2)

        ttk.Label(frm, text="Name").grid(row=1, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(frm, textvariable=self.var_name, width=40).grid(row=1, column=1, sticky="w", padx=4, pady=2)

        self.supplier = SupplierSelector(frm, store, label="Supplier")
        self.supplier.grid(row=2, column=0, columnspan=2, sticky="w")

        ttk.Label(frm, text="Initial quantity").grid(row=3, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(frm, textvariable=self.var_qty, width=12).grid(row=3, column=1, sticky="w", padx=4, pady=2)

        btns = ttk.Frame(self)
        btns.pack(fill="x", padx=8, pady=(0, 8))
        ttk.Button(btns, text="Save Product", command=self.on_save).pack(side="right", padx=4)
        ttk.Button(btns, text="Reset", command=self.on_reset).pack(side="right", padx=4)

    def on_reset(self):
        self.var_code.set("")
        self.var_name.set("")
        self.var_qty.set("0")
        self.supplier.set_selected(None)

    def on_save(self):
        try:
            p = self.store.register_product(
                self.var_code.get(),
                self.var_name.get(),
                self.supplier.get_selected(),
                self.var_qty.get(),
            )
        except InventoryError as e:
            logger.warning("register product rejected: %s", e)
            messagebox.showerror("Error", str(e), parent=self)
            return
        messagebox.showinfo("Saved", f"Product {p.code} saved", parent=self)
        self.on_reset()
        if self.tabs is not None:
            self.tabs.refresh_all()

    def refresh(self):
        self.supplier.refresh_all()


class ProductListFrame(ttk.Frame):
    def __init__(self, parent, store, tabs=None, detail_limit: int = 10):
        super().__init__(parent)
        self.store = store
        self.tabs = tabs
        self.detail_limit = detail_limit
        self._rows: List[Product] = []

        header_bar(self, "Product List", on_refresh=self.refresh)

        body = ttk.Frame(self)
        body.pack(fill="both", expand=True, padx=8, pady=4)

        cols = ("code", "name", "quantity", "supplier")
        self.tree = ttk.Treeview(body, columns=cols, show="headings", height=18, selectmode="browse")
        for c, w, t in [("code", 90, "Code"), ("name", 200, "Name"), ("quantity", 80, "Qty"), ("supplier", 140, "Supplier")]:
            self.tree.heading(c, text=t)
            self.tree.column(c, width=w, anchor="w")
        self.tree.pack(side="left", fill="y", padx=(0, 6))
        self.tree.bind("<<TreeviewSelect>>", lambda e: self.show_details())

        self.txt = tk.Text(body, wrap="none", height=18, state="disabled")
        self.txt.pack(side="left", fill="both", expand=True)

        ops = ttk.Frame(self)
        ops.pack(fill="x", padx=8, pady=8)
        ttk.Button(ops, text="Edit (name/supplier)", command=self.on_edit).pack(side="left", padx=4)
        ttk.Button(ops, text="Remove Product", command=self.on_delete).pack(side="left", padx=4)

        self.refresh()

    def _selected(self) -> Optional[Product]:
        sel = self.tree.selection()
        if not sel:
            return None
        idx = self.tree.index(sel[0])
        return self._rows[idx] if idx < len(self._rows) else None

    def _set_text(self, text: str):
        self.txt.configure(state="normal")
        self.txt.delete("1.0", "end")
        self.txt.insert("1.0", text)
        self.txt.configure(state="disabled")

    def show_details(self):
        p = self._selected()
        self._set_text(product_detail(self.store, p, self.detail_limit) if p is not None else "")

    def on_edit(self):
        p = self._selected()
        if p is None:
            messagebox.showwarning("Products", "Select a product", parent=self)
            return
        dlg = ProductEditDialog(self, self.store, p)
        if dlg.result is None:
            return
        name, supplier = dlg.result
        try:
            self.store.edit_product(p, name, supplier)
        except InventoryError as e:
            messagebox.showerror("Error", str(e), parent=self)
            return
        messagebox.showinfo("Products", "Product updated", parent=self)
        self._after_change()

    def on_delete(self):
        p = self._selected()
        if p is None:
            messagebox.showwarning("Products", "Select a product", parent=self)
            return
        if not confirm_delete(self, f"product {p.code}"):
            return
        try:
            self.store.delete_product(p)
        except InventoryError as e:
            messagebox.showerror("Error", str(e), parent=self)
            return
        messagebox.showinfo("Products", "Product removed", parent=self)
        self._after_change()

    def _after_change(self):
        if self.tabs is not None:
            self.tabs.refresh_all()
        else:
            self.refresh()

    def refresh(self):
        self.tree.delete(*self.tree.get_children())
        self._rows = list(self.store.products)
        for p in self._rows:
            self.tree.insert("", "end", values=(
                p.code,
                p.name,
                p.quantity,
                p.supplier.name if p.supplier is not None else "",
            ))
        self._set_text("")


class StockChartFrame(ttk.Frame):
    def __init__(self, parent, store):
        super().__init__(parent)
        self.store = store

        top = ttk.LabelFrame(self, text="Stock level over time")
        top.pack(fill="x", padx=8, pady=6)

        self.var_from = tk.StringVar(value="")
        self.var_to = tk.StringVar(value="")

        self.selector = ProductSelector(top, store)
        self.selector.grid(row=0, column=0, columnspan=6, sticky="w")

        ttk.Label(top, text="From (YYYY-MM-DD)").grid(row=1, column=0, sticky="w", padx=4, pady=2)
        ttk.Entry(top, textvariable=self.var_from, width=16).grid(row=1, column=1, sticky="w", padx=4, pady=2)
        ttk.Label(top, text="To (YYYY-MM-DD)").grid(row=1, column=2, sticky="w", padx=4, pady=2)
        ttk.Entry(top, textvariable=self.var_to, width=16).grid(row=1, column=3, sticky="w", padx=4, pady=2)

        ttk.Button(top, text="Show", command=self.plot).grid(row=1, column=4, sticky="w", padx=6, pady=2)
        ttk.Button(top, text="7 days", command=lambda: self._preset_days(7)).grid(row=1, column=5, sticky="w", padx=4, pady=2)
        ttk.Button(top, text="30 days", command=lambda: self._preset_days(30)).grid(row=1, column=6, sticky="w", padx=4, pady=2)
        ttk.Button(top, text="Clear", command=self._clear_range).grid(row=1, column=7, sticky="w", padx=4, pady=2)

        fig = Figure(figsize=(10, 5), dpi=100)
        self.ax = fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(fig, master=self)
        self.canvas.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=8)
        self.fig = fig

        self.refresh()

    def _preset_days(self, days: int):
        end = datetime.now()
        start = end - timedelta(days=days)
        self.var_from.set(start.strftime("%Y-%m-%d"))
        self.var_to.set(end.strftime("%Y-%m-%d"))
        self.plot()

    def _clear_range(self):
        self.var_from.set("")
        self.var_to.set("")
        self.plot()

    def refresh(self):
        self.selector.refresh_all()
        self.plot()

    def plot(self):
        p = self.selector.get_selected()
        self.ax.clear()

        if p is None:
            self.ax.set_title("Select a product")
            self.canvas.draw()
            return

        try:
            start_d = parse_date_yyyy_mm_dd(self.var_from.get()) if self.var_from.get().strip() else None
            end_d = parse_date_yyyy_mm_dd(self.var_to.get()) if self.var_to.get().strip() else None
        except ValueError:
            messagebox.showwarning("Chart", "Dates must be YYYY-MM-DD", parent=self)
            return

        xs, ys = [], []
        for ts, level in stock_level_series(self.store, p):
            if start_d and ts.date() < start_d:
                continue
            if end_d and ts.date() > end_d:
                continue
            xs.append(ts)
            ys.append(level)

        self.ax.step(xs, ys, where="post", marker="o")
        self.ax.set_title(f"Stock level: {p.name} ({p.code})")
        self.ax.set_xlabel("Date")
        self.ax.set_ylabel("Quantity")
        self.fig.autofmt_xdate()
        self.canvas.draw()
