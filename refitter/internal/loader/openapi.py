"""
Загрузка OpenAPI документа из файла или по URL
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict

import httpx
import jsonref
import yaml
from pydantic import ValidationError

from ...errors import (
    DocumentNetworkError,
    DocumentNotFoundError,
    DocumentParseError,
    LoadError,
)
from ..types.document import Document, parse_document
from .locator import SourceKind, classify

logger = logging.getLogger(__name__)


def _decode_json(text: str, location: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Некорректный JSON: {e}", location) from e


def _decode_yaml(text: str, location: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"Некорректный YAML: {e}", location) from e


def _to_document(data: Any, location: str) -> Document:
    if not isinstance(data, dict):
        raise DocumentParseError("Документ не является объектом", location)

    if "paths" not in data:
        raise DocumentParseError("В документе нет раздела paths", location)

    if not isinstance(data["paths"], dict):
        raise DocumentParseError("Раздел paths не является объектом", location)

    try:
        document = parse_document(data)
    except jsonref.JsonRefError as e:
        raise DocumentParseError(f"Не удалось разрешить ссылку: {e}", location) from e
    except (ValidationError, TypeError, AttributeError) as e:
        raise DocumentParseError(
            f"Некорректная структура документа: {e}", location
        ) from e

    logger.debug(
        "Загружен документ %s: %d операций, %d схем",
        location,
        len(document.operations),
        len(document.schemas),
    )
    return document


def _create_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True)


async def _fetch(location: str) -> str:
    try:
        async with _create_client() as client:
            response = await client.get(location)
    except httpx.HTTPError as e:
        raise DocumentNetworkError(f"Ошибка соединения: {e}", location) from e

    if response.status_code == 404:
        raise DocumentNotFoundError("Документ не найден (404)", location)

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DocumentNetworkError(
            f"Сервер вернул статус {response.status_code}", location
        ) from e

    return response.text


def _read(location: str) -> str:
    try:
        with open(location, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise DocumentNotFoundError("Файл не найден", location) from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Файл не в UTF-8: {e}", location) from e
    except OSError as e:
        raise LoadError(f"Ошибка чтения файла: {e}", location) from e


async def load_remote_yaml(location: str) -> Document:
    text = await _fetch(location)
    return _to_document(_decode_yaml(text, location), location)


async def load_remote_json(location: str) -> Document:
    text = await _fetch(location)
    return _to_document(_decode_json(text, location), location)


async def load_local_yaml(location: str) -> Document:
    return _to_document(_decode_yaml(_read(location), location), location)


async def load_local_json(location: str) -> Document:
    return _to_document(_decode_json(_read(location), location), location)


LOADERS: Dict[SourceKind, Callable[[str], Awaitable[Document]]] = {
    SourceKind.REMOTE_YAML: load_remote_yaml,
    SourceKind.REMOTE_JSON: load_remote_json,
    SourceKind.LOCAL_YAML: load_local_yaml,
    SourceKind.LOCAL_JSON: load_local_json,
}


async def load_document(location: str) -> Document:
    """Загрузка документа через загрузчик, выбранный по расположению"""
    kind = classify(location)
    logger.debug("Загрузка %s как %s", location, kind.value)
    return await LOADERS[kind](location)
