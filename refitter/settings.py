"""
Настройки генерации
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class TypeAccessibility(str, Enum):
    PUBLIC = "public"
    INTERNAL = "internal"


class NamingSettings(BaseModel):
    """Правила именования интерфейса"""

    model_config = ConfigDict(frozen=True)

    use_openapi_title: bool = True
    interface_name: str = "ApiClient"


class GenerationSettings(BaseModel):
    """Неизменяемые настройки одного запуска генерации"""

    model_config = ConfigDict(frozen=True)

    openapi_path: str
    namespace: str = "GeneratedCode"
    naming: NamingSettings = NamingSettings()

    generate_contracts: bool = True
    generate_xml_doc_code_comments: bool = True
    add_auto_generated_header: bool = True
    return_iapi_response: bool = False
    generate_operation_headers: bool = True
    type_accessibility: TypeAccessibility = TypeAccessibility.PUBLIC
    use_cancellation_tokens: bool = False
    use_iso_date_format: bool = False

    additional_namespaces: Tuple[str, ...] = ()
    exclude_namespaces: Tuple[str, ...] = ()
    include_tags: Tuple[str, ...] = ()
    include_path_matches: Tuple[str, ...] = ()

    @field_validator(
        "additional_namespaces",
        "exclude_namespaces",
        "include_tags",
        "include_path_matches",
        mode="before",
    )
    def list_check(cls, value):
        if value is None:
            return ()

        if isinstance(value, str):
            return (value,)

        return tuple(value)
