"""
ComposeDoc I/O Module

Importing external content into documents.
"""

from .image_importer import ImageImporter

__all__ = ['ImageImporter']
