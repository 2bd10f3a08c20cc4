"""
ComposeDoc - composite document editor.

Documents are trees of text, image and chart elements that can be
grouped, moved, resized, drawn and hit-tested uniformly.
"""

__version__ = "0.1.0"
