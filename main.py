import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from services.app_state import AppState
from ui.app_window import AppWindow, appearance_for
from utils.app_config import get_db_folder, get_log_level

logger = logging.getLogger(__name__)


def main():
    # ── Bootstrap: logging and DB folder from pre-DB config ──────────────────
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db_folder = get_db_folder()

    # ── Database & state ─────────────────────────────────────────────────────
    db = DatabaseManager.open(db_folder=db_folder)
    state = AppState.load(db)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(appearance_for(state.dark_mode))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(state)

    def on_close():
        logger.info("Shutting down")
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
