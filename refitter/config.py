"""
Конфигурация генерации в файле refitter.toml
"""

import os
from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional

import toml

from .settings import GenerationSettings, NamingSettings

CONFIG_FILE_NAME = "refitter.toml"


@dataclass
class RefitterConfig:
    """Конфигурация генератора Refit клиента"""

    openapi_path: Optional[str] = None
    namespace: str = "GeneratedCode"
    output_path: str = "Output.cs"

    use_openapi_title: bool = True
    interface_name: str = "ApiClient"

    generate_contracts: bool = True
    generate_xml_doc_code_comments: bool = True
    add_auto_generated_header: bool = True
    return_iapi_response: bool = False
    generate_operation_headers: bool = True
    type_accessibility: str = "public"
    use_cancellation_tokens: bool = False
    use_iso_date_format: bool = False

    additional_namespaces: List[str] = field(default_factory=list)
    exclude_namespaces: List[str] = field(default_factory=list)
    include_tags: List[str] = field(default_factory=list)
    include_path_matches: List[str] = field(default_factory=list)

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: str = None
    ) -> Optional["RefitterConfig"]:
        """Загрузка конфигурации из файла, None если файла нет"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        config_data = toml.load(config_path)
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_data.items() if k in known})

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {k: v for k, v in asdict(self).items() if v is not None}

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "RefitterConfig":
        """Объединение с аргументами командной строки (аргументы важнее)"""
        merged = asdict(self)
        for name, value in vars(args).items():
            if name not in merged or value is None:
                continue
            if isinstance(value, list) and not value:
                continue
            merged[name] = value
        return RefitterConfig(**merged)

    def to_settings(self) -> GenerationSettings:
        """Неизменяемые настройки генерации"""
        if not self.openapi_path:
            raise ValueError("Путь к OpenAPI спецификации не указан в конфигурации")

        data = asdict(self)
        data.pop("output_path")
        naming = NamingSettings(
            use_openapi_title=data.pop("use_openapi_title"),
            interface_name=data.pop("interface_name"),
        )
        return GenerationSettings(naming=naming, **data)
