"""
Классификация расположения OpenAPI документа
"""

from enum import Enum


class SourceKind(str, Enum):
    REMOTE_YAML = "remote-yaml"
    REMOTE_JSON = "remote-json"
    LOCAL_YAML = "local-yaml"
    LOCAL_JSON = "local-json"


def is_http(location: str) -> bool:
    """URL с точным префиксом http:// или https:// (с учетом регистра)"""
    return location.startswith("http://") or location.startswith("https://")


def is_yaml(location: str) -> bool:
    """
    Строка заканчивается на yaml или yml (с учетом регистра).

    Проверяется вся строка как есть: для URL с query string после
    расширения результат будет False и документ загрузится как JSON.
    """
    return location.endswith("yaml") or location.endswith("yml")


def classify(location: str) -> SourceKind:
    """Выбор способа загрузки. JSON используется по умолчанию"""
    if is_http(location) and is_yaml(location):
        return SourceKind.REMOTE_YAML
    if is_http(location):
        return SourceKind.REMOTE_JSON
    if is_yaml(location):
        return SourceKind.LOCAL_YAML
    return SourceKind.LOCAL_JSON
