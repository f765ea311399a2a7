"""
Генерация C# контрактов (классов и enum) из схем документа
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel

from ...errors import EmissionError
from ..types.code import (
    Attribute,
    ClassDeclaration,
    DocComment,
    EnumDeclaration,
    EnumMember,
    Property,
    indent,
)
from ..utils.naming import pascal_case, unique_name
from .context import GeneratorContext, operation_name
from .templates import templates
from .types import is_enum_schema, schema_type

logger = logging.getLogger(__name__)


class ContractOutput(BaseModel):
    """Текст контрактов и пространства имен, которые этот текст квалифицирует"""

    code: str
    namespaces: List[str] = []


class ContractGenerator:
    """Генератор контрактов для схем документа и inline схем операций"""

    def __init__(self, context: GeneratorContext):
        self.context = context
        self.types = context.types

    def generate(self) -> ContractOutput:
        declarations = []

        for schema_name, schema in self.context.document.schemas.items():
            if schema.get("enum") and not is_enum_schema(schema):
                logger.debug("Числовой enum %s без объявления типа", schema_name)
                continue
            type_name = self.types.type_name(schema_name)
            declarations.append(self._generate_declaration(type_name, schema))

        self._register_operation_schemas()

        # Очередь растет по мере обхода вложенных inline схем
        index = 0
        while index < len(self.types.inline_schemas):
            type_name, schema = self.types.inline_schemas[index]
            declarations.append(self._generate_declaration(type_name, schema))
            index += 1

        logger.debug(
            "Сгенерировано %d контрактов, пространства имен: %s",
            len(declarations),
            self.types.namespaces,
        )

        code = templates.namespace_block.format(
            namespace=self.context.settings.namespace,
            body=indent("\n\n".join(declarations)),
        )
        return ContractOutput(code=code, namespaces=list(self.types.namespaces))

    def _register_operation_schemas(self):
        """Регистрация inline типов из параметров, тел и ответов операций"""
        for operation in self.context.included_operations():
            owner = operation_name(operation)
            for parameter in operation.parameters:
                self.types.resolve(
                    parameter.schema_, owner + pascal_case(parameter.name)
                )
            if operation.request_body is not None:
                self.types.resolve(operation.request_body, owner + "Body")
            if operation.response is not None:
                self.types.resolve(operation.response, owner + "Response")

    def _generated_code_attribute(self) -> Attribute:
        return Attribute(
            name=self.types.use_namespace(templates.generated_code_attribute_name),
            arguments=templates.generated_code_arguments,
        )

    def _doc(self, schema: Dict[str, Any]):
        if not self.context.settings.generate_xml_doc_code_comments:
            return None
        description = schema.get("description")
        return DocComment(summary=description) if description else None

    def _generate_declaration(self, type_name: str, schema: Dict[str, Any]) -> str:
        if is_enum_schema(schema):
            return str(self._generate_enum(type_name, schema))
        return str(self._generate_class(type_name, schema))

    def _generate_enum(self, type_name: str, schema: Dict[str, Any]) -> EnumDeclaration:
        attributes = [self._generated_code_attribute()]
        members = []
        taken = set()

        is_string = schema_type(schema) in ("string", None)
        if is_string:
            attributes.append(
                Attribute(
                    name=self.types.use_namespace(templates.json_converter_attribute),
                    arguments=[templates.string_enum_converter],
                )
            )

        for order, value in enumerate(schema.get("enum", [])):
            if value is None:
                continue

            if is_string:
                name = pascal_case(str(value)) or "Empty"
                member_attributes = [
                    Attribute(
                        name=self.types.use_namespace(templates.enum_member_attribute),
                        arguments=[f"Value = {_verbatim(str(value))}"],
                    )
                ]
            else:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise EmissionError(
                        f"Значение {value!r} enum {type_name} не является целым"
                    )
                name = f"_{value}".replace("-", "_")
                member_attributes = []
                order = value

            members.append(
                EnumMember(
                    name=unique_name(name, taken),
                    value=str(value),
                    order=order,
                    attributes=member_attributes,
                )
            )

        return EnumDeclaration(
            name=type_name,
            accessibility=self.context.accessibility,
            attributes=attributes,
            members=members,
            doc=self._doc(schema),
        )

    def _generate_class(
        self, type_name: str, schema: Dict[str, Any]
    ) -> ClassDeclaration:
        inherits = []
        properties = dict(schema.get("properties", {}) or {})
        required = set(schema.get("required", []) or [])

        if schema.get("type") == "array":
            item_type = self.types.resolve(schema.get("items"), type_name + "Item")
            collection = self.types.use_namespace(
                "System.Collections.ObjectModel.Collection"
            )
            inherits.append(f"{collection}<{item_type}>")

        for part in schema.get("allOf", []) or []:
            if "$ref" in part and not inherits:
                inherits.append(self.types.ref_name(part["$ref"]))
                continue
            target = self.types.ref_schema(part["$ref"]) if "$ref" in part else part
            properties.update(target.get("properties", {}) or {})
            required.update(target.get("required", []) or [])

        declared = []
        taken = {type_name}
        for property_name, property_schema in properties.items():
            name = pascal_case(property_name) or "Value"
            if name == type_name:
                name = f"{name}Property"
            name = unique_name(name, taken)

            declared.append(
                Property(
                    name=name,
                    var_type=self.types.resolve(
                        property_schema,
                        owner=type_name + pascal_case(property_name),
                        nullable=property_name not in required,
                    ),
                    attributes=[
                        Attribute(
                            name=self.types.use_namespace(
                                templates.json_property_name_attribute
                            ),
                            arguments=[f'"{property_name}"'],
                        )
                    ],
                    doc=self._doc(property_schema)
                    if isinstance(property_schema, dict)
                    else None,
                )
            )

        return ClassDeclaration(
            name=type_name,
            accessibility=self.context.accessibility,
            inherits=inherits,
            attributes=[self._generated_code_attribute()],
            properties=declared,
            doc=self._doc(schema),
        )


def _verbatim(text: str) -> str:
    """C# verbatim строка @"..." с удвоением кавычек"""
    return '@"' + text.replace('"', '""') + '"'


def generate_contracts(context: GeneratorContext) -> ContractOutput:
    """Контракты для документа контекста"""
    return ContractGenerator(context).generate()
