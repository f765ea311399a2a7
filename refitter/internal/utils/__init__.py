"""Утилиты для генератора"""

from .naming import (
    pascal_case,
    camel_case,
    clean_identifier,
    clean_schema_name,
    unique_name,
)

__all__ = [
    "pascal_case",
    "camel_case",
    "clean_identifier",
    "clean_schema_name",
    "unique_name",
]
