"""
Utilities package for country_record.

Shared helpers for cross-cutting concerns. No domain logic here.
"""

from country_record.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
