"""
Catalog Search

In-memory product catalog indexed by name, category and brand, with
combined-criteria search.
"""

__version__ = "1.0.0"
