"""
Генерация Refit интерфейса: один метод на операцию документа
"""

import logging
from typing import List, Optional

from ..types.code import (
    Attribute,
    DocComment,
    InterfaceDeclaration,
    MethodParameter,
    MethodSignature,
    indent,
)
from ..types.document import Operation, OperationParameter
from ..utils.naming import camel_case, clean_identifier, pascal_case, unique_name
from .context import GeneratorContext, operation_name
from .templates import templates

logger = logging.getLogger(__name__)

ISO_DATE_FORMAT = '"yyyy-MM-dd"'


class InterfaceGenerator:
    """Генератор тела Refit интерфейса"""

    def __init__(self, context: GeneratorContext):
        self.context = context
        self.settings = context.settings
        self.types = context.types

    def generate(self) -> str:
        methods = []
        taken = set()

        for operation in self.context.included_operations():
            name = unique_name(operation_name(operation), taken)
            methods.append(self._generate_method(name, operation))

        logger.debug("Сгенерировано %d методов интерфейса", len(methods))

        interface = InterfaceDeclaration(
            name=self.interface_name(),
            accessibility=self.context.accessibility,
            attributes=[
                Attribute(
                    name=templates.generated_code_attribute_name,
                    arguments=templates.generated_code_arguments,
                )
            ],
            methods=methods,
            doc=self._interface_doc(),
        )
        return indent(str(interface))

    def interface_name(self) -> str:
        """Имя интерфейса из title документа или из настроек"""
        title = pascal_case(self.context.document.title)
        if self.settings.naming.use_openapi_title and title:
            return f"I{title}"

        name = pascal_case(self.settings.naming.interface_name) or "ApiClient"
        if len(name) > 1 and name[0] == "I" and name[1].isupper():
            return name
        return f"I{name}"

    def _interface_doc(self) -> Optional[DocComment]:
        description = self.context.document.description
        if not self.settings.generate_xml_doc_code_comments or not description:
            return None
        return DocComment(summary=description)

    def _return_type(self, operation: Operation, owner: str) -> str:
        if operation.response is None:
            if self.settings.return_iapi_response:
                return "Task<IApiResponse>"
            return "Task"

        response_type = self.types.resolve(operation.response, owner + "Response")
        if self.settings.return_iapi_response:
            return f"Task<IApiResponse<{response_type}>>"
        return f"Task<{response_type}>"

    def _generate_method(self, name: str, operation: Operation) -> MethodSignature:
        owner = operation_name(operation)
        verb_attribute = templates.http_method_attributes[operation.verb]

        attributes = []
        if operation.deprecated:
            attributes.append(Attribute(name="System.Obsolete"))
        attributes.append(
            Attribute(name=verb_attribute, arguments=[f'"{operation.path}"'])
        )

        required, optional = [], []
        docs = []
        # имена параметров одного метода не должны совпадать
        taken = set()

        for parameter in self._ordered_parameters(operation):
            method_parameter = self._generate_parameter(parameter, owner, taken)
            if method_parameter is None:
                continue

            if parameter.description:
                docs.append((method_parameter.name.lstrip("@"), parameter.description))

            if method_parameter.default:
                optional.append(method_parameter)
            else:
                required.append(method_parameter)

        if operation.request_body is not None:
            required.append(
                MethodParameter(
                    name=unique_name("body", taken),
                    var_type=self.types.resolve(operation.request_body, owner + "Body"),
                    attributes=[Attribute(name="Body")],
                )
            )

        parameters = required + optional
        if self.settings.use_cancellation_tokens:
            parameters.append(
                MethodParameter(
                    name=unique_name("cancellationToken", taken),
                    var_type="CancellationToken",
                    default="default",
                )
            )

        doc = None
        if self.settings.generate_xml_doc_code_comments:
            summary = operation.summary or operation.description
            doc = DocComment(
                summary=summary,
                params=docs,
                returns=None
                if operation.response is None
                else "The deserialized response body.",
            )

        return MethodSignature(
            name=name,
            response=self._return_type(operation, owner),
            parameters=parameters,
            attributes=attributes,
            doc=doc or None,
        )

    @staticmethod
    def _ordered_parameters(operation: Operation) -> List[OperationParameter]:
        """Параметры в порядке path, query, header"""
        order = {"path": 0, "query": 1, "header": 2}
        return sorted(
            (p for p in operation.parameters if p.location in order),
            key=lambda p: order[p.location],
        )

    def _generate_parameter(
        self, parameter: OperationParameter, owner: str, taken: set
    ) -> Optional[MethodParameter]:
        if (
            parameter.location == "header"
            and not self.settings.generate_operation_headers
        ):
            return None

        name = unique_name(camel_case(parameter.name) or "value", taken)
        optional = not parameter.required and parameter.location != "path"
        var_type = self.types.resolve(
            parameter.schema_,
            owner + pascal_case(parameter.name),
            nullable=optional,
        )

        attributes = []
        if parameter.location == "query":
            if (
                self.settings.use_iso_date_format
                and parameter.schema_.get("format") == "date"
            ):
                attributes.append(
                    Attribute(name="Query", arguments=[f"Format = {ISO_DATE_FORMAT}"])
                )
            else:
                attributes.append(Attribute(name="Query"))
        elif parameter.location == "header":
            attributes.append(
                Attribute(name="Header", arguments=[f'"{parameter.name}"'])
            )

        if parameter.location != "header" and name != parameter.name:
            attributes.append(
                Attribute(name="AliasAs", arguments=[f'"{parameter.name}"'])
            )

        return MethodParameter(
            name=clean_identifier(name),
            var_type=var_type,
            attributes=attributes,
            default="default" if optional else None,
        )


def generate_interface(context: GeneratorContext) -> str:
    """Тело Refit интерфейса для документа контекста"""
    return InterfaceGenerator(context).generate()
