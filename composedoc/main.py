#!/usr/bin/env python3
"""
ComposeDoc - Main Entry Point

This is the main entry point for the ComposeDoc editor.
Run with: python -m composedoc.main
"""

import sys
from PyQt6.QtWidgets import QApplication


def main():
    """Main entry point for ComposeDoc application."""
    try:
        from .config import EditorSettings
        from .logging_config import setup_logging
        settings = EditorSettings()
        setup_logging(settings)

        app = QApplication(sys.argv)
        app.setApplicationName("ComposeDoc")
        app.setApplicationVersion("0.1.0")

        # Import here so the core never depends on a running QApplication
        from .core.measure import set_text_measurer
        from .graphics.font_metrics import QtTextMeasurer
        from .ui.mainwindow import MainWindow

        # Hit-test text with the same fonts the canvas paints with
        set_text_measurer(QtTextMeasurer(settings.font_family))

        window = MainWindow(settings)
        window.show()

        return app.exec()
    except Exception as e:
        print(f"Fatal error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
