"""
Иерархия ошибок генератора
"""


class RefitterError(Exception):
    """Базовая ошибка генератора"""


class LoadError(RefitterError):
    """Ошибка загрузки OpenAPI документа"""

    def __init__(self, message: str, location: str):
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}")


class DocumentNotFoundError(LoadError):
    """Файл или URL спецификации не найден"""


class DocumentNetworkError(LoadError):
    """Сетевая ошибка при загрузке спецификации"""


class DocumentParseError(LoadError):
    """Спецификация не является корректным JSON/YAML документом"""


class EmissionError(RefitterError):
    """Ошибка генерации кода (неподдерживаемая конструкция схемы)"""
