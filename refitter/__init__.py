"""
Генератор Refit интерфейсов для C# из OpenAPI спецификаций
"""

__version__ = "0.3.0"

from .errors import (
    RefitterError,
    LoadError,
    DocumentNotFoundError,
    DocumentNetworkError,
    DocumentParseError,
    EmissionError,
)
from .settings import GenerationSettings, NamingSettings, TypeAccessibility
from .generator import RefitGenerator, generate_code

__all__ = [
    "RefitterError",
    "LoadError",
    "DocumentNotFoundError",
    "DocumentNetworkError",
    "DocumentParseError",
    "EmissionError",
    "GenerationSettings",
    "NamingSettings",
    "TypeAccessibility",
    "RefitGenerator",
    "generate_code",
]
