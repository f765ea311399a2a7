"""
Тесты разбора OpenAPI документа в модель Document
"""

import logging

import pytest
from pydantic import ValidationError

from refitter.internal.types.document import parse_document


class TestParseDocument:
    """Тесты построения Document"""

    def test_operations_keep_document_order(self, petstore_spec):
        """Операции идут в порядке путей и методов документа"""
        document = parse_document(petstore_spec)

        assert [(op.verb, op.path) for op in document.operations] == [
            ("get", "/pets"),
            ("post", "/pets"),
            ("get", "/pets/{petId}"),
            ("delete", "/pets/{petId}"),
        ]

    def test_parameter_reference_is_resolved(self, petstore_spec):
        """Ссылка на components/parameters разворачивается"""
        document = parse_document(petstore_spec)
        parameter = document.operations[2].parameters[0]

        assert parameter.name == "petId"
        assert parameter.location == "path"
        assert parameter.required is True
        assert parameter.schema_ == {"type": "integer", "format": "int64"}

    def test_schema_references_are_kept(self, petstore_spec):
        """Ссылки на схемы остаются $ref для имен типов"""
        document = parse_document(petstore_spec)

        assert document.operations[1].request_body == {
            "$ref": "#/components/schemas/Pet"
        }
        assert document.operations[0].response == {
            "type": "array",
            "items": {"$ref": "#/components/schemas/Pet"},
        }
        assert document.operations[1].response is None

    def test_parameter_schema_reference_is_kept(self, petstore_spec):
        """$ref на схему внутри параметра из components/parameters не разворачивается"""
        petstore_spec["components"]["schemas"]["PetId"] = {
            "type": "integer",
            "format": "int64",
        }
        petstore_spec["components"]["parameters"]["PetId"]["schema"] = {
            "$ref": "#/components/schemas/PetId"
        }

        document = parse_document(petstore_spec)

        assert document.operations[2].parameters[0].schema_ == {
            "$ref": "#/components/schemas/PetId"
        }

    def test_path_level_parameters(self):
        """Параметры уровня пути наследуются операциями"""
        document = parse_document(
            {
                "openapi": "3.0.0",
                "info": {"title": "T", "version": "1"},
                "paths": {
                    "/items/{id}": {
                        "parameters": [
                            {
                                "name": "id",
                                "in": "path",
                                "required": True,
                                "schema": {"type": "string"},
                            }
                        ],
                        "get": {"responses": {"204": {"description": "ok"}}},
                    }
                },
            }
        )

        assert [p.name for p in document.operations[0].parameters] == ["id"]

    def test_swagger2_document(self):
        """Swagger 2: definitions, body параметр и schema в ответе"""
        document = parse_document(
            {
                "swagger": "2.0",
                "info": {"title": "Old", "version": "1"},
                "paths": {
                    "/users": {
                        "post": {
                            "operationId": "addUser",
                            "parameters": [
                                {
                                    "name": "body",
                                    "in": "body",
                                    "schema": {"$ref": "#/definitions/User"},
                                },
                                {"name": "dryRun", "in": "query", "type": "boolean"},
                            ],
                            "responses": {
                                "200": {
                                    "description": "ok",
                                    "schema": {"$ref": "#/definitions/User"},
                                }
                            },
                        }
                    }
                },
                "definitions": {"User": {"type": "object"}},
            }
        )
        operation = document.operations[0]

        assert document.openapi_version == "2.0"
        assert list(document.schemas) == ["User"]
        assert operation.request_body == {"$ref": "#/definitions/User"}
        assert operation.response == {"$ref": "#/definitions/User"}
        assert operation.parameters[0].schema_ == {"type": "boolean"}

    def test_form_data_parameter_is_skipped(self, caplog):
        """formData параметры не попадают в операцию, пропуск виден в логе"""
        with caplog.at_level(logging.DEBUG, logger="refitter.internal.types.document"):
            document = parse_document(
                {
                    "swagger": "2.0",
                    "info": {"title": "Upload", "version": "1"},
                    "paths": {
                        "/files": {
                            "post": {
                                "parameters": [
                                    {"name": "file", "in": "formData", "type": "file"},
                                    {"name": "tag", "in": "query", "type": "string"},
                                ],
                                "responses": {"204": {"description": "ok"}},
                            }
                        }
                    },
                }
            )

        assert [p.name for p in document.operations[0].parameters] == ["tag"]
        assert "formData file" in caplog.text

    def test_document_is_immutable(self, ping_spec):
        """Document нельзя изменить после загрузки"""
        document = parse_document(ping_spec)

        with pytest.raises(ValidationError):
            document.title = "Changed"
