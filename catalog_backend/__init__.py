"""
Catalog backend.

Wires a Supabase client to the category and settings tables and exposes
them through a small FastAPI service.
"""

__version__ = "0.1.0"
