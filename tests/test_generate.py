from pathlib import Path

import pytest
from pydantic import ValidationError

from openapi_typegen.errors import MissingOperationIdError
from openapi_typegen.generator.declarations import generate
from openapi_typegen.parser.loader import load_document

FIXTURES = Path(__file__).parent / "fixtures"

PETSTORE_TYPES = """\
export interface ListPetsReq {
  query?: {
    limit?: number;
  };
}

export interface CreatePetReq {
  body?: {
    name: string;
    tag?: string;
  };
}

export interface ShowPetByIdReq {
  params?: {
    petId: string;
  };
  headers?: {
    X-Request-Id: string;
  };
}

export interface Pet {
  id: number;
  name: string;
  tags?: string[];
  owner?: Owner;
}

export interface Owner {
  name?: string;
}

export type PetAlias = Pet
"""


class TestGeneratePetstore:
    def test_full_output(self):
        assert generate(load_document(FIXTURES / "petstore.yaml")) == PETSTORE_TYPES

    def test_custom_indent(self):
        result = generate(load_document(FIXTURES / "petstore.yaml"), {"indent": 4})
        assert "    query?: {\n        limit?: number;\n    };\n" in result


class TestPathAndQueryParams:
    def test_required_path_and_optional_query(self):
        doc = {
            "paths": {
                "/users/{id}": {
                    "get": {
                        "operationId": "get_user",
                        "parameters": [
                            {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}},
                            {"name": "limit", "in": "query", "schema": {"type": "integer"}},
                        ],
                    }
                }
            }
        }
        assert generate(doc) == (
            "export interface GetUserReq {\n"
            "  params?: {\n"
            "    id: string;\n"
            "  };\n"
            "  query?: {\n"
            "    limit?: number;\n"
            "  };\n"
            "}\n"
            "\n"
        )


class TestGenerateErrors:
    def test_missing_operation_id_aborts(self):
        doc = load_document(FIXTURES / "no_operation_id.json")
        with pytest.raises(MissingOperationIdError, match=r"DELETE /orders/\{id\}"):
            generate(doc)

    def test_invalid_indent_rejected(self):
        with pytest.raises(ValidationError):
            generate({"paths": {}}, {"indent": 0})


class TestGenerateOrdering:
    def test_operations_before_components(self):
        doc = {
            "components": {"schemas": {"Zeta": {"type": "object", "properties": {}}}},
            "paths": {"/a": {"options": {"operationId": "preflight"}, "get": {"operationId": "fetch"}}},
        }
        result = generate(doc)
        assert result.index("FetchReq") < result.index("PreflightReq") < result.index("Zeta")

    def test_empty_document(self):
        assert generate({}) == ""

    def test_empty_json_body_renders_any(self):
        doc = {"paths": {"/a": {"post": {
            "operationId": "postA",
            "requestBody": {"content": {"application/json": {"schema": {}}}},
        }}}}
        assert generate(doc) == "export interface PostAReq {\n  body?: any;\n}\n\n"
