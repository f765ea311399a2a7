import json

import pytest
import yaml

PETSTORE = {
    "openapi": "3.0.1",
    "info": {
        "title": "Swagger Petstore",
        "version": "1.0.0",
        "description": "Sample pet store",
    },
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "summary": "List all pets",
                "tags": ["pets"],
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "description": "How many items to return",
                        "schema": {"type": "integer", "format": "int32"},
                    },
                    {
                        "name": "X-Request-ID",
                        "in": "header",
                        "schema": {"type": "string"},
                    },
                ],
                "responses": {
                    "200": {
                        "description": "A paged array of pets",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "array",
                                    "items": {"$ref": "#/components/schemas/Pet"},
                                }
                            }
                        },
                    }
                },
            },
            "post": {
                "operationId": "createPet",
                "summary": "Create a pet",
                "tags": ["pets"],
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/Pet"}
                        }
                    }
                },
                "responses": {"201": {"description": "Created"}},
            },
        },
        "/pets/{petId}": {
            "get": {
                "operationId": "getPetById",
                "summary": "Find pet",
                "tags": ["pets"],
                "parameters": [{"$ref": "#/components/parameters/PetId"}],
                "responses": {
                    "200": {
                        "description": "Expected response to a valid request",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/Pet"}
                            }
                        },
                    }
                },
            },
            "delete": {
                "operationId": "deletePet",
                "tags": ["admin"],
                "deprecated": True,
                "parameters": [{"$ref": "#/components/parameters/PetId"}],
                "responses": {"204": {"description": "Deleted"}},
            },
        },
    },
    "components": {
        "parameters": {
            "PetId": {
                "name": "petId",
                "in": "path",
                "required": True,
                "description": "ID of pet",
                "schema": {"type": "integer", "format": "int64"},
            }
        },
        "schemas": {
            "Pet": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "id": {"type": "integer", "format": "int64"},
                    "name": {"type": "string"},
                    "tags": {
                        "type": "array",
                        "items": {"$ref": "#/components/schemas/Tag"},
                    },
                    "status": {"type": "string", "enum": ["available", "sold"]},
                    "born": {"type": "string", "format": "date-time"},
                },
            },
            "Tag": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer", "format": "int64"},
                    "name": {"type": "string"},
                },
            },
        },
    },
}

PING = {
    "openapi": "3.0.1",
    "info": {"title": "Demo", "version": "1.0.0"},
    "paths": {
        "/ping": {
            "get": {
                "operationId": "Ping",
                "responses": {
                    "200": {
                        "description": "OK",
                        "content": {"application/json": {"schema": {}}},
                    }
                },
            }
        }
    },
}


@pytest.fixture
def petstore_spec():
    return json.loads(json.dumps(PETSTORE))


@pytest.fixture
def ping_spec():
    return json.loads(json.dumps(PING))


@pytest.fixture
def petstore_json_file(tmp_path, petstore_spec):
    path = tmp_path / "petstore.json"
    path.write_text(json.dumps(petstore_spec), encoding="utf-8")
    return str(path)


@pytest.fixture
def petstore_yaml_file(tmp_path, petstore_spec):
    path = tmp_path / "petstore.yaml"
    path.write_text(yaml.safe_dump(petstore_spec), encoding="utf-8")
    return str(path)
