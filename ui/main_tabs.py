# ui/main_tabs.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ui.product_tabs import ProductListFrame, ProductRegisterFrame, StockChartFrame
from ui.report_tabs import ReportsFrame
from ui.stock_tabs import StockInFrame, StockOutFrame
from ui.supplier_tabs import SuppliersFrame


class MainTabs(ttk.Frame):
    def __init__(self, parent, store, settings, *, on_logout):
        super().__init__(parent)
        self.store = store

        bar = ttk.Frame(self)
        bar.pack(fill="x", padx=8, pady=(8, 0))
        self.var_user = tk.StringVar(value="")
        ttk.Label(bar, textvariable=self.var_user).pack(side="left", padx=4)
        ttk.Button(bar, text="Sign out", command=on_logout).pack(side="right", padx=4)
        ttk.Button(bar, text="Refresh", command=self.refresh_all).pack(side="right", padx=4)

        nb = ttk.Notebook(self)
        nb.pack(fill="both", expand=True, padx=4, pady=4)

        self.tab_register = ProductRegisterFrame(nb, store, tabs=self)
        self.tab_list = ProductListFrame(nb, store, tabs=self, detail_limit=settings.PRODUCT_DETAIL_LIMIT)
        self.tab_in = StockInFrame(nb, store, tabs=self)
        self.tab_out = StockOutFrame(nb, store, tabs=self)
        self.tab_suppliers = SuppliersFrame(nb, store, tabs=self)
        self.tab_reports = ReportsFrame(nb, store, movements_limit=settings.RECENT_MOVEMENTS_LIMIT)
        self.tab_chart = StockChartFrame(nb, store)

        nb.add(self.tab_register, text="Register Product")
        nb.add(self.tab_list, text="Products")
        nb.add(self.tab_in, text="Stock In")
        nb.add(self.tab_out, text="Stock Out")
        nb.add(self.tab_suppliers, text="Suppliers")
        nb.add(self.tab_reports, text="Reports")
        nb.add(self.tab_chart, text="Stock Chart")

        # screens always show current store state when opened
        nb.bind("<<NotebookTabChanged>>", self._on_tab_changed)
        self.nb = nb

    def _on_tab_changed(self, _evt=None):
        tab = self.nametowidget(self.nb.select())
        tab.refresh()

    def set_user(self, user: str):
        self.var_user.set(f"Signed in as {user}")

    def refresh_all(self):
        self.tab_register.refresh()
        self.tab_list.refresh()
        self.tab_in.refresh()
        self.tab_out.refresh()
        self.tab_suppliers.refresh()
        self.tab_reports.refresh()
        self.tab_chart.refresh()
