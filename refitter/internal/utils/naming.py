"""Утилиты для работы с именами C# идентификаторов"""

import re

CSHARP_KEYWORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator", "out",
    "override", "params", "private", "protected", "public", "readonly",
    "ref", "return", "sbyte", "sealed", "short", "sizeof", "stackalloc",
    "static", "string", "struct", "switch", "this", "throw", "true", "try",
    "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
    "virtual", "void", "volatile", "while",
}


def _split_words(name: str) -> list:
    # Разбиваем по спецсимволам и по границам camelCase: userId -> user, Id
    clean = re.sub(r"[^a-zA-Z0-9]", " ", name)
    clean = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", clean)
    clean = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", clean)
    return [part for part in clean.split(" ") if part]


def pascal_case(name: str) -> str:
    """
    PascalCase преобразование для имен типов и методов.

    Examples:
        >>> pascal_case("get_user_by_id")
        'GetUserById'
        >>> pascal_case("pet-store")
        'PetStore'
        >>> pascal_case("HTTPError")
        'HTTPError'
    """
    if not name:
        return ""

    parts = []
    for part in _split_words(name):
        # аббревиатуры типа HTTP, API оставляем как есть
        if part.isupper() and len(part) <= 4:
            parts.append(part)
        else:
            parts.append(part[0].upper() + part[1:].lower())

    result = "".join(parts)
    if result and result[0].isdigit():
        result = f"_{result}"

    return result


def camel_case(name: str) -> str:
    """camelCase преобразование для имен параметров"""
    pascal = pascal_case(name)
    if not pascal:
        return ""

    if pascal.startswith("_"):
        return pascal

    # HTTPCode -> httpCode
    head = re.match(r"[A-Z]+(?=[A-Z][a-z]|$|[0-9])", pascal)
    if head and len(head.group(0)) > 1:
        size = len(head.group(0))
        return pascal[:size].lower() + pascal[size:]

    return pascal[0].lower() + pascal[1:]


def clean_identifier(name: str) -> str:
    """Экранирование зарезервированных слов C# через @"""
    if name in CSHARP_KEYWORDS:
        return f"@{name}"
    return name


def clean_schema_name(name: str) -> str:
    """Имя C# типа из имени схемы (последний сегмент для имен вида a.b.Pet)"""
    if "." in name:
        name = name.split(".")[-1]

    if name and name[0].isupper() and re.fullmatch(r"[A-Za-z0-9]+", name):
        return name

    return pascal_case(name) or "Model"


def unique_name(name: str, taken: set) -> str:
    """
    Свободное имя из name с числовым суффиксом 2, 3, ...

    Найденное имя добавляется в taken.
    """
    candidate = name
    index = 2
    while candidate in taken:
        candidate = f"{name}{index}"
        index += 1
    taken.add(candidate)
    return candidate
