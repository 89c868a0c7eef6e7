"""The root OpenAPI document, with YAML output and 3.0 downgrading."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import yaml

from oasgen.components import Components
from oasgen.info import ExternalDocs, Info, Server, Tag
from oasgen.marshal import Omit, marshal_fields
from oasgen.operations import Operation, PathItem

AddOperationHook = Callable[["OpenAPI", Operation], None]

_METHOD_SLOTS = {
    "GET": "get",
    "POST": "post",
    "PUT": "put",
    "PATCH": "patch",
    "DELETE": "delete",
    "HEAD": "head",
    "OPTIONS": "options",
    "TRACE": "trace",
}


class _Dumper(yaml.SafeDumper):
    """Block-style dumper that indents sequences and prefers double quotes."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)

    def choose_scalar_style(self) -> str:
        style = super().choose_scalar_style()
        return '"' if style == "'" else style


def _normalize_numbers(value: Any) -> Any:
    """Write integral floats as integers, the way JSON encoders print them."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _normalize_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize_numbers(item) for item in value]
    return value


def _dump_yaml(data: Any) -> str:
    return yaml.dump(
        _normalize_numbers(data),
        Dumper=_Dumper,
        sort_keys=True,
        default_flow_style=False,
        allow_unicode=True,
        width=1 << 30,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def downgrade_spec(value: Any) -> None:
    """Rewrite OpenAPI 3.1 constructs in ``value`` into 3.0 form, in place."""
    if isinstance(value, list):
        for item in value:
            downgrade_spec(item)
        return
    if not isinstance(value, dict):
        return

    for key in list(value):
        item = value[key]

        if key == "openapi" and item == "3.1.0":
            value[key] = "3.0.3"
            continue

        if key == "type" and isinstance(item, list):
            # Type arrays become a single type plus `nullable`; last non-null wins.
            for typ in item:
                if typ == "null":
                    value["nullable"] = True
                else:
                    value["type"] = typ
            continue

        if key == "exclusiveMinimum" and _is_number(item):
            value["minimum"] = item
            value["exclusiveMinimum"] = True
            continue

        if key == "exclusiveMaximum" and _is_number(item):
            value["maximum"] = item
            value["exclusiveMaximum"] = True
            continue

        if key == "examples" and isinstance(item, list):
            if item:
                value["example"] = item[0]
            if len(item) == 1:
                del value[key]
            continue

        if key == "application/octet-stream" and isinstance(item, dict) and not item:
            value[key] = {"schema": {"type": "string", "format": "binary"}}

        if key == "contentEncoding" and item == "base64":
            del value[key]
            value["format"] = "base64"
            continue

        downgrade_spec(item)


@dataclass
class OpenAPI:
    """The root object of an OpenAPI document."""

    openapi: str = ""
    info: Info | None = None
    json_schema_dialect: str = ""
    servers: list[Server] = field(default_factory=list)
    paths: dict[str, PathItem] = field(default_factory=dict)
    webhooks: dict[str, PathItem] = field(default_factory=dict)
    components: Components | None = None
    security: list[dict[str, list[str]]] | None = None
    """Security requirements; ``None`` leaves them out, ``[]`` is written."""

    tags: list[Tag] = field(default_factory=list)
    external_docs: ExternalDocs | None = None
    extensions: dict[str, Any] = field(default_factory=dict)
    on_add_operation: list[AddOperationHook] = field(default_factory=list)
    """Hooks called by ``add_operation``; writing to ``paths`` bypasses them."""

    def add_operation(self, op: Operation) -> None:
        """Place ``op`` under its path and method, then run the hooks.

        Raises ``ValueError`` for an HTTP method with no slot in a path item.
        """
        slot = _METHOD_SLOTS.get(op.method)
        if slot is None:
            raise ValueError(f"unknown method {op.method}")

        item = self.paths.get(op.path)
        if item is None:
            item = PathItem()
            self.paths[op.path] = item
        setattr(item, slot, op)

        for hook in self.on_add_operation:
            hook(self, op)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this document."""
        return marshal_fields(
            [
                ("openapi", self.openapi, Omit.NEVER),
                ("info", self.info, Omit.NEVER),
                ("jsonSchemaDialect", self.json_schema_dialect, Omit.EMPTY),
                ("servers", self.servers, Omit.EMPTY),
                ("paths", self.paths, Omit.EMPTY),
                ("webhooks", self.webhooks, Omit.EMPTY),
                ("components", self.components, Omit.EMPTY),
                ("security", self.security, Omit.NIL),
                ("tags", self.tags, Omit.EMPTY),
                ("externalDocs", self.external_docs, Omit.EMPTY),
            ],
            self.extensions,
        )

    def to_yaml(self) -> str:
        """Return the document as YAML with sorted keys."""
        return _dump_yaml(json.loads(json.dumps(self.to_json())))

    def downgrade(self) -> dict[str, Any]:
        """Return the document converted to OpenAPI 3.0.3 as JSON data."""
        data = json.loads(json.dumps(self.to_json()))
        downgrade_spec(data)
        return data

    def downgrade_yaml(self) -> str:
        """Return the document converted to OpenAPI 3.0.3 as YAML."""
        return _dump_yaml(self.downgrade())