# ui/login.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox

from errors import ValidationError
from utils import check_credentials

logger = logging.getLogger(__name__)


class LoginFrame(ttk.Frame):
    def __init__(self, parent, *, title: str, on_login):
        super().__init__(parent)
        self.on_login = on_login

        box = ttk.Frame(self, padding=20)
        box.place(relx=0.5, rely=0.45, anchor="center")

        ttk.Label(box, text=title, font=("", 22, "bold")).grid(row=0, column=0, columnspan=2, pady=(0, 16))

        self.var_user = tk.StringVar()
        self.var_pass = tk.StringVar()

        ttk.Label(box, text="User").grid(row=1, column=0, sticky="w", padx=4, pady=4)
        self.ent_user = ttk.Entry(box, textvariable=self.var_user, width=30)
        self.ent_user.grid(row=1, column=1, sticky="w", padx=4, pady=4)

        ttk.Label(box, text="Password").grid(row=2, column=0, sticky="w", padx=4, pady=4)
        ent_pass = ttk.Entry(box, textvariable=self.var_pass, width=30, show="*")
        ent_pass.grid(row=2, column=1, sticky="w", padx=4, pady=4)
        ent_pass.bind("<Return>", lambda e: self.on_submit())

        ttk.Button(box, text="Sign in", command=self.on_submit).grid(row=3, column=1, sticky="e", padx=4, pady=(12, 4))

    def reset(self):
        self.var_user.set("")
        self.var_pass.set("")
        self.ent_user.focus_set()

    def on_submit(self):
        try:
            user = check_credentials(self.var_user.get(), self.var_pass.get())
        except ValidationError as e:
            messagebox.showerror("Error", str(e), parent=self)
            return
        logger.info("signed in: %s", user)
        self.var_pass.set("")
        self.on_login(user)
