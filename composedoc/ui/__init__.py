"""
ComposeDoc UI Module

User interface components:
- MainWindow: Primary application window with the edit toolbar
- DocumentCanvas: Widget painting the document and handling clicks
"""
