# ui/report_tabs.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from reports import current_stock_report, recent_movements_report
from ui.common import header_bar


class ReportsFrame(ttk.Frame):
    def __init__(self, parent, store, movements_limit: int = 50):
        super().__init__(parent)
        self.store = store
        self.movements_limit = movements_limit

        header_bar(self, "Reports")

        self.txt = tk.Text(self, wrap="none", state="disabled")
        self.txt.pack(fill="both", expand=True, padx=8, pady=4)

        btns = ttk.Frame(self)
        btns.pack(fill="x", padx=8, pady=8)
        ttk.Button(btns, text="Generate: Current Stock", command=self.gen_stock_report).pack(side="left", padx=4)
        ttk.Button(btns, text="Generate: Recent Movements", command=self.gen_movements_report).pack(side="left", padx=4)

    def _show(self, text: str):
        self.txt.configure(state="normal")
        self.txt.delete("1.0", "end")
        self.txt.insert("1.0", text)
        self.txt.configure(state="disabled")

    def gen_stock_report(self):
        self._show(current_stock_report(self.store))

    def gen_movements_report(self):
        self._show(recent_movements_report(self.store, self.movements_limit))

    def refresh(self):
        # reports are generated on demand
        pass
