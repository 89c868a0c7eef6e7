# oasgen

Build OpenAPI 3.1 documents from plain Python objects, render them as JSON
data or YAML, and downgrade them to OpenAPI 3.0.3 for tools that do not yet
understand 3.1. A small helper for looking up a single query parameter in a raw
query string is included as well.

## Install

```
pip install oasgen
pip install "oasgen[test]"   # with pytest, to run the test suite
```

## Describing an API

The document classes are dataclasses that mirror the OpenAPI objects. Each one
has a `to_json()` method that returns a JSON-ready dict. Empty optional fields
are left out, and anything in `extensions` is written next to the regular
fields. If an extension has the same name as a field, the extension wins.

```python
from oasgen.document import OpenAPI
from oasgen.info import Info, Contact, Server
from oasgen.operations import Operation
from oasgen.media import Response

api = OpenAPI(
    openapi="3.1.0",
    info=Info(title="Pet Store", version="1.0.0", contact=Contact(email="support@example.com")),
    servers=[Server(url="https://api.example.com")],
    extensions={"x-team": "pets"},
)

api.add_operation(
    Operation(
        method="GET",
        path="/pets",
        operation_id="list-pets",
        responses={"200": Response(description="OK")},
    )
)

print(api.to_json())        # OpenAPI 3.1 as a dict
print(api.to_yaml())        # OpenAPI 3.1 as YAML
print(api.downgrade())      # OpenAPI 3.0.3 as a dict
print(api.downgrade_yaml()) # OpenAPI 3.0.3 as YAML
```

`add_operation` places the operation on the `PathItem` for its `path`,
creating the item if there is none, in the slot for its `method`. The method
must be an upper-case HTTP method name: `GET`, `POST`, `PUT`, `PATCH`,
`DELETE`, `HEAD`, `OPTIONS` or `TRACE`. Any other value raises `ValueError`.
After that, every hook in `on_add_operation` is called with the document and
the operation. If you write to `paths` directly, the hooks do not run.

The fields of `Operation` that come before `tags` (`method`, `path`,
`default_status`, `max_body_bytes`, `body_read_timeout`, `errors`,
`skip_validate_params`, `skip_validate_body`, `hidden`, `metadata`,
`middlewares`) are carried on the object but are never written to the
document.

A `security` value of `None` is left out of the output. An empty list is
written, which removes any inherited requirements. `Components.schemas` takes
any mapping, or any object with a `to_json()` method. It is written whenever it
is not `None`, even if it is empty.

`to_yaml()` writes the keys in sorted order and the sequences indented. Floats
with an integral value are written as integers, so `1.0` comes out as `1`.

### Downgrading to 3.0.3

`downgrade()` and `downgrade_yaml()` change the following in the output:

- `openapi: 3.1.0` becomes `3.0.3`;
- type arrays are reduced to a single type: `null` becomes `nullable: true`,
  and the last non-null type is kept;
- numeric `exclusiveMinimum` and `exclusiveMaximum` become `minimum` and
  `maximum`, with the exclusive flag set to `true`;
- the first entry of an `examples` list is copied into `example`, and a
  one-entry list is removed;
- an empty `application/octet-stream` media type gets a binary string schema;
- `contentEncoding: base64` becomes `format: base64`.

`downgrade_spec(value)` applies the same rewrites in place to any JSON data.

### Modules

| Module | Contents |
| --- | --- |
| `oasgen.info` | `Contact`, `License`, `Info`, `ServerVariable`, `Server`, `ExternalDocs`, `Tag` |
| `oasgen.media` | `Example`, `Encoding`, `MediaType`, `Param` (also available as `Header`), `RequestBody`, `Link`, `Response` |
| `oasgen.operations` | `Operation`, `PathItem` |
| `oasgen.components` | `OAuthFlow`, `OAuthFlows`, `SecurityScheme`, `Components` |
| `oasgen.document` | `OpenAPI`, `downgrade_spec` |

Fields whose OpenAPI names clash with Python keywords have a trailing
underscore. For example, `Param.in_` and `SecurityScheme.in_` are written as
`in`.

## Query parameters

```python
from oasgen.queryparam import get

get("foo=bar&baz=123", "baz")            # "123"
get("foo=bar&baz=123&flag", "flag")      # "true"  (a key with no value)
get("foo=bar", "missing")                # ""
get("ascii=%3Ckey%3A+0x90%3E", "ascii")  # "<key: 0x90>"
```

Names and values are percent-decoded, and `+` is decoded as a space. A
malformed escape decodes to an empty string. Only the first value of a
repeated key is returned, so `val=1,2,3` suits this helper better than
`val=1&val=2&val=3`.

## Lower-level helpers

`oasgen.marshal` holds the field-omission rules behind every `to_json()`:

- `Omit.NEVER` always writes the field.
- `Omit.EMPTY` skips `None`, empty strings and containers, `False` and zero.
- `Omit.NIL` skips only `None`.

The module also has `is_empty_value`, `is_nil_value`, `to_jsonable` and
`marshal_fields`, for writing document objects of your own.

## What it does not do

This package describes an API but does not serve one. It has no HTTP server
and no request routing. It does not generate JSON Schemas from Python types
and does not validate requests: schemas are supplied as plain data. It has no
`Accept` header content negotiation, and it has no command-line tool.