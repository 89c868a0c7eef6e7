"""Request, response and parameter description objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from oasgen.info import Server
from oasgen.marshal import Omit, marshal_fields


@dataclass
class Example:
    """An example value for a parameter, header or body."""

    ref: str = ""
    summary: str = ""
    description: str = ""
    value: Any = None
    external_value: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this example."""
        return marshal_fields(
            [
                ("$ref", self.ref, Omit.EMPTY),
                ("summary", self.summary, Omit.EMPTY),
                ("description", self.description, Omit.EMPTY),
                ("value", self.value, Omit.NIL),
                ("externalValue", self.external_value, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class Encoding:
    """Encoding applied to a single schema property of a request body."""

    content_type: str = ""
    headers: dict[str, Param] = field(default_factory=dict)
    style: str = ""
    explode: bool | None = None
    allow_reserved: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this encoding."""
        return marshal_fields(
            [
                ("contentType", self.content_type, Omit.EMPTY),
                ("headers", self.headers, Omit.EMPTY),
                ("style", self.style, Omit.EMPTY),
                ("explode", self.explode, Omit.NIL),
                ("allowReserved", self.allow_reserved, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class MediaType:
    """Schema and examples for one media type."""

    schema: Any = None
    example: Any = None
    examples: dict[str, Example] = field(default_factory=dict)
    encoding: dict[str, Encoding] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this media type."""
        return marshal_fields(
            [
                ("schema", self.schema, Omit.NIL),
                ("example", self.example, Omit.NIL),
                ("examples", self.examples, Omit.EMPTY),
                ("encoding", self.encoding, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class Param:
    """A single operation parameter, also used for header objects."""

    ref: str = ""
    name: str = ""
    in_: str = ""
    description: str = ""
    required: bool = False
    deprecated: bool = False
    allow_empty_value: bool = False
    style: str = ""
    explode: bool | None = None
    allow_reserved: bool = False
    schema: Any = None
    example: Any = None
    examples: dict[str, Example] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this parameter."""
        return marshal_fields(
            [
                ("$ref", self.ref, Omit.EMPTY),
                ("name", self.name, Omit.EMPTY),
                ("in", self.in_, Omit.EMPTY),
                ("description", self.description, Omit.EMPTY),
                ("required", self.required, Omit.EMPTY),
                ("deprecated", self.deprecated, Omit.EMPTY),
                ("allowEmptyValue", self.allow_empty_value, Omit.EMPTY),
                ("style", self.style, Omit.EMPTY),
                ("explode", self.explode, Omit.NIL),
                ("allowReserved", self.allow_reserved, Omit.EMPTY),
                ("schema", self.schema, Omit.NIL),
                ("example", self.example, Omit.NIL),
                ("examples", self.examples, Omit.EMPTY),
            ],
            self.extensions,
        )


Header = Param
"""A header object shares the structure of a parameter."""


@dataclass
class RequestBody:
    """A single request body."""

    ref: str = ""
    description: str = ""
    content: dict[str, MediaType] = field(default_factory=dict)
    required: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this request body."""
        return marshal_fields(
            [
                ("$ref", self.ref, Omit.EMPTY),
                ("description", self.description, Omit.EMPTY),
                ("content", self.content, Omit.NEVER),
                ("required", self.required, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class Link:
    """A design-time link from a response to another operation."""

    ref: str = ""
    operation_ref: str = ""
    operation_id: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)
    request_body: Any = None
    description: str = ""
    server: Server | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this link."""
        return marshal_fields(
            [
                ("$ref", self.ref, Omit.EMPTY),
                ("operationRef", self.operation_ref, Omit.EMPTY),
                ("operationId", self.operation_id, Omit.EMPTY),
                ("parameters", self.parameters, Omit.EMPTY),
                ("requestBody", self.request_body, Omit.NIL),
                ("description", self.description, Omit.EMPTY),
                ("server", self.server, Omit.NIL),
            ],
            self.extensions,
        )


@dataclass
class Response:
    """A single response from an operation."""

    ref: str = ""
    description: str = ""
    headers: dict[str, Param] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)
    links: dict[str, Link] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this response."""
        return marshal_fields(
            [
                ("$ref", self.ref, Omit.EMPTY),
                ("description", self.description, Omit.EMPTY),
                ("headers", self.headers, Omit.EMPTY),
                ("content", self.content, Omit.EMPTY),
                ("links", self.links, Omit.EMPTY),
            ],
            self.extensions,
        )