"""
Model mixins for shared functionality across entities.

This module provides reusable SQLAlchemy mixins that can be inherited
by multiple models to add common functionality.
"""

from hackhub.models.mixins.identity import IdMixin, TimestampMixin, generate_id, ID_LENGTH

__all__ = ["IdMixin", "TimestampMixin", "generate_id", "ID_LENGTH"]
