# app.py
import logging
import tkinter as tk
from tkinter import ttk, messagebox

from config import get_settings
from log_config import setup_logging
from store import InventoryStore
from ui.login import LoginFrame
from ui.main_tabs import MainTabs

logger = logging.getLogger(__name__)


def apply_theme(style: ttk.Style, theme_name: str) -> None:
    names = style.theme_names()
    if theme_name and theme_name in names:
        style.theme_use(theme_name)


class App:
    """Owns the store and switches between the login screen and the main tabs."""

    def __init__(self, root: tk.Tk, store: InventoryStore, settings):
        self.root = root
        self.store = store

        self.login = LoginFrame(root, title="Stock Manager", on_login=self.show_main)
        self.main = MainTabs(root, store, settings, on_logout=self.show_login)
        self.show_login()

    def show_login(self):
        self.main.pack_forget()
        self.login.pack(fill="both", expand=True)
        self.login.reset()

    def show_main(self, user: str):
        self.login.pack_forget()
        self.main.set_user(user)
        self.main.refresh_all()
        self.main.pack(fill="both", expand=True)


def main():
    settings = get_settings()
    setup_logging(settings)

    root = tk.Tk()
    root.title(settings.APP_TITLE)
    root.geometry(settings.WINDOW_GEOMETRY)

    try:
        store = InventoryStore(seed=settings.SEED_EXAMPLE_DATA)
    except Exception as e:
        logger.exception("store initialisation failed")
        messagebox.showerror("Startup error", f"Could not initialise the data store.\n\n{e}")
        return

    style = ttk.Style(root)
    apply_theme(style, settings.THEME)

    App(root, store, settings)
    logger.info("started with %d products, %d suppliers", len(store.products), len(store.suppliers))
    root.mainloop()


if __name__ == "__main__":
    main()
