"""
Структурированная модель OpenAPI документа
"""

import logging
from typing import Any, Dict, List, Optional

import jsonref
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

HTTP_VERBS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

JSON_CONTENT_TYPES = ("application/json", "text/json", "application/*+json")


class OperationParameter(BaseModel):
    """Параметр операции (path/query/header/cookie)"""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str
    required: bool = False
    description: Optional[str] = None
    schema_: Dict[str, Any] = Field(default_factory=dict)


class Operation(BaseModel):
    """Одна операция: HTTP метод + шаблон пути"""

    model_config = ConfigDict(frozen=True)

    verb: str
    path: str
    operation_id: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    deprecated: bool = False
    tags: List[str] = []
    parameters: List[OperationParameter] = []
    request_body: Optional[Dict[str, Any]] = None
    response: Optional[Dict[str, Any]] = None


class Document(BaseModel):
    """Загруженный OpenAPI документ. Не изменяется после создания"""

    model_config = ConfigDict(frozen=True)

    openapi_version: str = "3.0.0"
    title: str = ""
    version: str = ""
    description: Optional[str] = None
    operations: List[Operation] = []
    schemas: Dict[str, Dict[str, Any]] = {}


def _unresolve(node: Any) -> Any:
    """
    Копия узла в обычные dict/list, где ссылки на схемы снова становятся {"$ref": ...}.

    jsonref подменяет ссылки прокси-объектами с атрибутом __reference__,
    имя схемы нужно генератору для имени C# типа.
    """
    reference = getattr(node, "__reference__", None)
    if reference is not None:
        return {"$ref": reference["$ref"]}

    if isinstance(node, dict):
        return {key: _unresolve(value) for key, value in node.items()}

    if isinstance(node, list):
        return [_unresolve(item) for item in node]

    return node


def _pick_content_schema(content: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Схема JSON содержимого (или первого доступного типа)"""
    if not content:
        return None

    for content_type in JSON_CONTENT_TYPES:
        if content_type in content:
            return content[content_type].get("schema")

    for media in content.values():
        if "schema" in media:
            return media["schema"]

    return None


def _parse_parameters(path_level: List, operation_level: List) -> tuple:
    """Параметры операции с учетом параметров уровня пути и swagger body"""
    merged = {}
    for param in list(path_level) + list(operation_level):
        # Параметр операции перекрывает параметр пути с тем же name+in
        merged[(param.get("name"), param.get("in"))] = param

    parameters = []
    body_schema = None
    for (name, location), param in merged.items():
        if location == "body":
            body_schema = _unresolve(param.get("schema", {}))
            continue

        if location == "formData":
            logger.debug("Параметр formData %s пропущен", name)
            continue

        schema = param.get("schema")
        if schema is None:
            # Swagger 2: тип указан прямо в параметре
            schema = {
                key: param[key]
                for key in ("type", "format", "items", "enum")
                if key in param
            }

        parameters.append(
            OperationParameter(
                name=name,
                location=location,
                required=bool(param.get("required", location == "path")),
                description=param.get("description"),
                schema_=_unresolve(schema),
            )
        )

    return parameters, body_schema


def _parse_response(responses: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Схема первого успешного ответа с телом"""
    for status_code in sorted(responses.keys(), key=str):
        if not str(status_code).startswith("2"):
            continue

        response = responses[status_code]
        schema = _pick_content_schema(response.get("content", {}))
        if schema is None:
            schema = response.get("schema")

        if schema is not None:
            return _unresolve(schema)

    return None


def parse_document(raw: Dict[str, Any]) -> Document:
    """Построение Document из декодированного JSON/YAML"""
    resolved = jsonref.replace_refs(raw, lazy_load=True)

    info = raw.get("info", {}) or {}
    operations = []

    for path, path_item in resolved.get("paths", {}).items():
        path_parameters = path_item.get("parameters", [])

        for verb in path_item.keys():
            if verb not in HTTP_VERBS:
                continue

            spec = path_item[verb]
            parameters, body_schema = _parse_parameters(
                path_parameters, spec.get("parameters", [])
            )

            request_body = spec.get("requestBody")
            if request_body:
                body_schema = _unresolve(
                    _pick_content_schema(request_body.get("content", {}))
                )

            operations.append(
                Operation(
                    verb=verb,
                    path=path,
                    operation_id=spec.get("operationId"),
                    summary=spec.get("summary"),
                    description=spec.get("description"),
                    deprecated=bool(spec.get("deprecated", False)),
                    tags=list(spec.get("tags", [])),
                    parameters=parameters,
                    request_body=body_schema,
                    response=_parse_response(spec.get("responses", {})),
                )
            )

    schemas = raw.get("components", {}).get("schemas") or raw.get("definitions") or {}

    return Document(
        openapi_version=str(raw.get("openapi") or raw.get("swagger") or "3.0.0"),
        title=info.get("title", ""),
        version=str(info.get("version", "")),
        description=info.get("description"),
        operations=operations,
        schemas=dict(schemas),
    )
