"""
Vocabulary Analyzer - Main Application Entry Point

This module initializes the CustomTkinter application and launches the main window.
"""

import customtkinter as ctk

from vocab_analyzer.config import APP_NAME, LOGS_DIR
from vocab_analyzer.logging_config import close_debug_log, info


def main():
    """
    Main entry point for the Vocabulary Analyzer desktop application.
    """
    from vocab_analyzer.ui.main_window import MainWindow

    info(f"--- {APP_NAME} starting (logs in {LOGS_DIR}) ---")

    # Set appearance mode (light/dark/system)
    ctk.set_appearance_mode("System")  # Options: "System", "Dark", "Light"
    ctk.set_default_color_theme("blue")  # Options: "blue", "green", "dark-blue"

    try:
        app = MainWindow()
        app.mainloop()
    finally:
        close_debug_log()


if __name__ == "__main__":
    main()
