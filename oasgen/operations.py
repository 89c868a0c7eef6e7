"""Operation and path item objects."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from oasgen.info import ExternalDocs, Server
from oasgen.marshal import Omit, marshal_fields
from oasgen.media import Param, RequestBody, Response


@dataclass
class Operation:
    """A single API operation on a path.

    The fields before ``tags`` control how the operation is served and are
    never written to the OpenAPI document.
    """

    method: str = ""
    """HTTP method for this operation."""

    path: str = ""
    """URL path for this operation."""

    default_status: int = 0
    """Default HTTP status; 0 means it is chosen from the handler's output."""

    max_body_bytes: int = 0
    """Request body size limit; 0 means the default and -1 unlimited."""

    body_read_timeout: float = 0.0
    """Seconds to wait for the body; 0 means the default and -1 unlimited."""

    errors: list[int] = field(default_factory=list)
    """HTTP status codes the handler may return as errors."""

    skip_validate_params: bool = False
    skip_validate_body: bool = False

    hidden: bool = False
    """Leave this operation out of the generated document."""

    metadata: dict[str, Any] = field(default_factory=dict)
    middlewares: list[Callable[..., Any]] = field(default_factory=list)

    tags: list[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    external_docs: ExternalDocs | None = None
    operation_id: str = ""
    parameters: list[Param] = field(default_factory=list)
    request_body: RequestBody | None = None
    responses: dict[str, Response] = field(default_factory=dict)
    callbacks: dict[str, dict[str, PathItem]] = field(default_factory=dict)
    deprecated: bool = False
    security: list[dict[str, list[str]]] | None = None
    """Security requirements; ``None`` inherits, an empty list removes them."""

    servers: list[Server] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this operation."""
        return marshal_fields(
            [
                ("tags", self.tags, Omit.EMPTY),
                ("summary", self.summary, Omit.EMPTY),
                ("description", self.description, Omit.EMPTY),
                ("externalDocs", self.external_docs, Omit.EMPTY),
                ("operationId", self.operation_id, Omit.EMPTY),
                ("parameters", self.parameters, Omit.EMPTY),
                ("requestBody", self.request_body, Omit.EMPTY),
                ("responses", self.responses, Omit.EMPTY),
                ("callbacks", self.callbacks, Omit.EMPTY),
                ("deprecated", self.deprecated, Omit.EMPTY),
                ("security", self.security, Omit.NIL),
                ("servers", self.servers, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class PathItem:
    """The operations available on a single path."""

    ref: str = ""
    summary: str = ""
    description: str = ""
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = field(default_factory=list)
    parameters: list[Param] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this path item."""
        return marshal_fields(
            [
                ("$ref", self.ref, Omit.EMPTY),
                ("summary", self.summary, Omit.EMPTY),
                ("description", self.description, Omit.EMPTY),
                ("get", self.get, Omit.EMPTY),
                ("put", self.put, Omit.EMPTY),
                ("post", self.post, Omit.EMPTY),
                ("delete", self.delete, Omit.EMPTY),
                ("options", self.options, Omit.EMPTY),
                ("head", self.head, Omit.EMPTY),
                ("patch", self.patch, Omit.EMPTY),
                ("trace", self.trace, Omit.EMPTY),
                ("servers", self.servers, Omit.EMPTY),
                ("parameters", self.parameters, Omit.EMPTY),
            ],
            self.extensions,
        )