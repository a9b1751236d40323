"""
Output generation for the external site generator.
"""

from .index import build_published_index, index_entry, write_published_index

__all__ = ["build_published_index", "index_entry", "write_published_index"]
