import json

import pytest

from oasgen.info import Server
from oasgen.media import (
    Encoding,
    Example,
    Header,
    Link,
    MediaType,
    Param,
    RequestBody,
    Response,
)


@pytest.mark.parametrize(
    "obj",
    [Example(), Encoding(), MediaType(), Param(), Link(), Response()],
)
def test_empty_objects_marshal_to_empty_dict(obj):
    assert obj.to_json() == {}


def test_request_body_always_has_content():
    assert RequestBody().to_json() == {"content": {}}


def test_example_value_kept_when_falsy():
    assert Example(value=0).to_json() == {"value": 0}
    assert Example(value="").to_json() == {"value": ""}


def test_example_value_matches_source_sample():
    ex = Example(value='{"test": "example"}')
    assert ex.to_json() == {"value": '{"test": "example"}'}


def test_example_ref_and_external_value():
    ex = Example(ref="#/components/examples/foo", external_value="https://example.com/x.json")
    assert ex.to_json() == {
        "$ref": "#/components/examples/foo",
        "externalValue": "https://example.com/x.json",
    }


def test_encoding_explode_false_is_written():
    assert Encoding(explode=False).to_json() == {"explode": False}
    assert Encoding(explode=True).to_json() == {"explode": True}


def test_encoding_allow_reserved_false_is_omitted():
    assert "allowReserved" not in Encoding(allow_reserved=False).to_json()
    assert Encoding(allow_reserved=True).to_json()["allowReserved"] is True


def test_media_type_nests_objects():
    mt = MediaType(
        examples={"test": Example(value='{"test": "example"}')},
        encoding={"test": Encoding(content_type="application/json")},
        schema={"type": "object"},
    )
    assert mt.to_json() == {
        "schema": {"type": "object"},
        "examples": {"test": {"value": '{"test": "example"}'}},
        "encoding": {"test": {"contentType": "application/json"}},
    }


def test_media_type_schema_via_to_json_object():
    class _Schema:
        def to_json(self):
            return {"type": "integer"}

    assert MediaType(schema=_Schema()).to_json() == {"schema": {"type": "integer"}}


def test_param_field_names():
    p = Param(
        name="username",
        in_="path",
        description="username to fetch",
        required=True,
        schema={"type": "string"},
    )
    assert p.to_json() == {
        "name": "username",
        "in": "path",
        "description": "username to fetch",
        "required": True,
        "schema": {"type": "string"},
    }


def test_param_false_flags_omitted_explode_kept():
    out = Param(deprecated=False, allow_empty_value=False, explode=False).to_json()
    assert out == {"explode": False}


def test_header_is_param():
    assert Header is Param
    assert Header(description="d").to_json() == {"description": "d"}


def test_extensions_inline_and_override():
    p = Param(name="a", extensions={"x-test": 123, "name": "b"})
    assert p.to_json() == {"name": "b", "x-test": 123}


def test_request_body_with_content():
    rb = RequestBody(
        description="user to add to the system",
        content={"application/json": MediaType(schema={"$ref": "#/components/schemas/User"})},
        required=True,
    )
    assert rb.to_json() == {
        "description": "user to add to the system",
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/User"}}},
        "required": True,
    }


def test_link_with_server_and_request_body():
    link = Link(
        operation_id="getUserAddress",
        parameters={"userId": "$request.path.id"},
        request_body=False,
        server=Server(url="https://example.com"),
    )
    assert link.to_json() == {
        "operationId": "getUserAddress",
        "parameters": {"userId": "$request.path.id"},
        "requestBody": False,
        "server": {"url": "https://example.com"},
    }


def test_response_full_structure_is_json_serialisable():
    resp = Response(
        description="OK",
        headers={"X-Rate-Limit-Limit": Param(schema={"type": "integer"})},
        content={"application/json": MediaType()},
        links={"related": Link(operation_id="another-operation")},
    )
    out = resp.to_json()
    assert out == {
        "description": "OK",
        "headers": {"X-Rate-Limit-Limit": {"schema": {"type": "integer"}}},
        "content": {"application/json": {}},
        "links": {"related": {"operationId": "another-operation"}},
    }
    assert json.loads(json.dumps(out)) == out


def test_to_json_does_not_mutate_object():
    resp = Response(description="OK", links={"related": Link(operation_id="op")})
    resp.to_json()
    assert isinstance(resp.links["related"], Link)
    assert resp.links["related"].operation_id == "op"