"""
Pydantic schemas for records and API request/response validation.
"""

from .records import Category, Settings

__all__ = ["Category", "Settings"]
