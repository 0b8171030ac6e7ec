"""
Models package for the material archive.
Exports the archive container.
"""

from catalog.src.models.archive import Archive

__all__ = ["Archive"]
