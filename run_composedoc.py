#!/usr/bin/env python3
"""
ComposeDoc Launcher Script

Simple launcher for the ComposeDoc editor from a source checkout.
"""

import sys
import os

# Add the project root to path if needed
if os.path.dirname(os.path.abspath(__file__)) not in sys.path:
    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


if __name__ == "__main__":
    try:
        from PyQt6 import QtWidgets
    except ImportError as qt_error:
        print(f"PyQt6 Import Error: {qt_error}")
        print("Install the dependencies with:")
        print("  pip install -r requirements.txt")
        sys.exit(1)

    from composedoc.main import main
    sys.exit(main())
