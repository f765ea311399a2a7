"""
Разрешение C# типов из JSON схем
"""

from typing import Any, Dict, List, Optional, Tuple

from ...errors import EmissionError
from ..utils.naming import clean_schema_name, pascal_case, unique_name

# Только такие enum становятся C# enum, числовые остаются double/float/decimal
ENUM_SCHEMA_TYPES = ("string", "integer", None)

VALUE_TYPES = {
    "bool",
    "int",
    "long",
    "float",
    "double",
    "decimal",
    "System.DateTimeOffset",
    "System.TimeSpan",
    "System.Guid",
}

LOCAL_REF_PREFIXES = ("#/components/schemas/", "#/definitions/")


def schema_type(schema: Dict[str, Any]) -> Optional[str]:
    value = schema.get("type")
    if isinstance(value, list):
        # OpenAPI 3.1: ["string", "null"]
        return next((t for t in value if t != "null"), None)
    return value


def is_enum_schema(schema: Any) -> bool:
    """Схема со списком enum, которая генерируется как C# enum"""
    if not isinstance(schema, dict) or not schema.get("enum"):
        return False
    return schema_type(schema) in ENUM_SCHEMA_TYPES


class TypeResolver:
    """
    Отображение JSON схем на имена C# типов.

    Имена типов из пространств имен System.* всегда полностью квалифицированы,
    каждое использованное пространство имен запоминается в namespaces.
    Inline объекты и enum получают имя владельца + имя свойства и
    копятся в очереди inline_schemas для генератора контрактов.
    """

    def __init__(self, schemas: Dict[str, Dict[str, Any]]):
        self.schemas = schemas
        self.namespaces: List[str] = []
        self.inline_schemas: List[Tuple[str, Dict[str, Any]]] = []
        self._type_names = {}
        self._register_schemas()

    def _register_schemas(self):
        """Регистрация имен всех схем документа с разрешением коллизий"""
        taken = set()
        for schema_name in self.schemas.keys():
            self._type_names[schema_name] = unique_name(
                clean_schema_name(schema_name), taken
            )

    def use_namespace(self, qualified_name: str) -> str:
        """Запоминает пространство имен квалифицированного имени"""
        namespace = qualified_name.rsplit(".", 1)[0]
        if namespace not in self.namespaces:
            self.namespaces.append(namespace)
        return qualified_name

    def type_name(self, schema_name: str) -> str:
        return self._type_names.get(schema_name, clean_schema_name(schema_name))

    def ref_name(self, ref: str) -> str:
        """Имя типа по $ref на схему"""
        for prefix in LOCAL_REF_PREFIXES:
            if ref.startswith(prefix):
                schema_name = ref[len(prefix) :]
                if schema_name not in self.schemas:
                    raise EmissionError(f"Схема не найдена: {ref}")
                return self.type_name(schema_name)

        raise EmissionError(f"Неподдерживаемая ссылка на схему: {ref}")

    def ref_schema(self, ref: str) -> Dict[str, Any]:
        for prefix in LOCAL_REF_PREFIXES:
            if ref.startswith(prefix):
                return self.schemas.get(ref[len(prefix) :], {})
        return {}

    def is_enum(self, schema: Optional[Dict[str, Any]]) -> bool:
        if not isinstance(schema, dict) or not schema:
            return False
        if "$ref" in schema:
            return is_enum_schema(self.ref_schema(schema["$ref"]))
        return is_enum_schema(schema)

    def resolve(
        self,
        schema: Optional[Dict[str, Any]],
        owner: str = "",
        nullable: bool = False,
    ) -> str:
        """C# тип для схемы, value types становятся T? при nullable"""
        type_name = self._resolve(schema, owner)

        is_nullable = nullable or (isinstance(schema, dict) and schema.get("nullable"))
        if is_nullable and self._is_value_type(schema, type_name):
            return f"{type_name}?"

        return type_name

    def _is_value_type(self, schema, type_name: str) -> bool:
        return type_name in VALUE_TYPES or self.is_enum(schema)

    def _resolve(self, schema: Optional[Dict[str, Any]], owner: str) -> str:
        if not isinstance(schema, dict) or not schema:
            return "object"

        if "$ref" in schema:
            target = self.ref_schema(schema["$ref"])
            if target.get("enum") and not is_enum_schema(target):
                # числовой enum без объявления, используется сам тип числа
                return self._resolve(target, owner)
            return self.ref_name(schema["$ref"])

        for composite in ("allOf", "oneOf", "anyOf"):
            parts = schema.get(composite)
            if parts and len(parts) == 1:
                return self._resolve(parts[0], owner)
            if parts:
                return "object"

        kind = schema_type(schema)
        format_type = schema.get("format")

        if is_enum_schema(schema):
            return self._inline(owner, schema)

        if kind == "integer":
            return "long" if format_type == "int64" else "int"

        if kind == "number":
            return {"float": "float", "decimal": "decimal"}.get(format_type, "double")

        if kind == "boolean":
            return "bool"

        if kind == "string":
            if format_type in ("date-time", "date"):
                return self.use_namespace("System.DateTimeOffset")
            if format_type == "time":
                return self.use_namespace("System.TimeSpan")
            if format_type == "uuid":
                return self.use_namespace("System.Guid")
            if format_type in ("binary", "byte"):
                return "byte[]"
            return "string"

        if kind == "array":
            item_type = self._resolve(schema.get("items"), owner)
            collection = self.use_namespace("System.Collections.Generic.ICollection")
            return f"{collection}<{item_type}>"

        if kind == "object" or "properties" in schema:
            if schema.get("properties"):
                return self._inline(owner, schema)

            additional = schema.get("additionalProperties")
            if isinstance(additional, dict):
                dictionary = self.use_namespace(
                    "System.Collections.Generic.IDictionary"
                )
                return f"{dictionary}<string, {self._resolve(additional, owner)}>"

        return "object"

    def _inline(self, owner: str, schema: Dict[str, Any]) -> str:
        """Регистрация inline схемы как отдельного типа"""
        for name, known in self.inline_schemas:
            if known is schema:
                return name

        taken = set(self._type_names.values()) | {n for n, _ in self.inline_schemas}
        name = unique_name(pascal_case(owner) if owner else "Anonymous", taken)

        self.inline_schemas.append((name, schema))
        return name
