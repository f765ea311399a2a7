"""
Импорты пространств имен и удаление их префиксов из текста контрактов
"""

import re
from functools import reduce
from typing import Iterable, List

from ...settings import GenerationSettings
from .templates import templates

DEFAULT_NAMESPACES = (
    "Refit",
    "System.Collections.Generic",
    "System.Text.Json.Serialization",
    "System.Threading.Tasks",
)


def get_imported_namespaces(settings: GenerationSettings) -> List[str]:
    """
    Итоговый список импортируемых пространств имен.

    Порядок задается настройками (не сортируется): значения по умолчанию,
    System.Threading для CancellationToken, затем additional_namespaces.
    Повторы убираются с сохранением первого вхождения, после чего
    отбрасываются имена, подходящие под любой regex из exclude_namespaces.
    """
    namespaces = list(DEFAULT_NAMESPACES)

    if settings.use_cancellation_tokens:
        namespaces.append("System.Threading")

    namespaces.extend(settings.additional_namespaces)

    unique = list(dict.fromkeys(ns for ns in namespaces if ns))

    if settings.exclude_namespaces:
        patterns = [re.compile(pattern) for pattern in settings.exclude_namespaces]
        unique = [ns for ns in unique if not any(p.search(ns) for p in patterns)]

    return unique


def generate_namespace_imports(settings: GenerationSettings) -> str:
    """Строки using, по одной на пространство имен, без завершающего перевода строки"""
    return "\n".join(
        templates.using_statement.format(namespace=namespace)
        for namespace in get_imported_namespaces(settings)
    )


def strip_namespace_prefix(code: str, namespace: str) -> str:
    """
    Глобальная текстовая замена "namespace." на пустую строку.

    Замена не учитывает лексику: строки, комментарии и идентификаторы,
    содержащие такую подстроку, тоже изменяются.
    """
    return code.replace(f"{namespace}.", "")


def strip_namespace_prefixes(code: str, namespaces: Iterable[str]) -> str:
    """Последовательное удаление префиксов, результат зависит от порядка"""
    return reduce(strip_namespace_prefix, namespaces, code)
