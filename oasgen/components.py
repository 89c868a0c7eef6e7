"""Security schemes and the reusable components container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from oasgen.marshal import Omit, marshal_fields
from oasgen.media import Example, Link, Param, RequestBody, Response
from oasgen.operations import PathItem


@dataclass
class OAuthFlow:
    """Configuration details for one supported OAuth flow."""

    authorization_url: str = ""
    token_url: str = ""
    refresh_url: str = ""
    scopes: dict[str, str] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this flow."""
        return marshal_fields(
            [
                ("authorizationUrl", self.authorization_url, Omit.EMPTY),
                ("tokenUrl", self.token_url, Omit.NEVER),
                ("refreshUrl", self.refresh_url, Omit.EMPTY),
                ("scopes", self.scopes, Omit.NEVER),
            ],
            self.extensions,
        )


@dataclass
class OAuthFlows:
    """The OAuth flows a security scheme supports."""

    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = None
    authorization_code: OAuthFlow | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for these flows."""
        return marshal_fields(
            [
                ("implicit", self.implicit, Omit.EMPTY),
                ("password", self.password, Omit.EMPTY),
                ("clientCredentials", self.client_credentials, Omit.EMPTY),
                ("authorizationCode", self.authorization_code, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class SecurityScheme:
    """A security scheme that operations can use.

    ``type`` is one of ``apiKey``, ``http``, ``mutualTLS``, ``oauth2`` or
    ``openIdConnect``.
    """

    type: str = ""
    description: str = ""
    name: str = ""
    in_: str = ""
    scheme: str = ""
    bearer_format: str = ""
    flows: OAuthFlows | None = None
    open_id_connect_url: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this security scheme."""
        return marshal_fields(
            [
                ("type", self.type, Omit.NEVER),
                ("description", self.description, Omit.EMPTY),
                ("name", self.name, Omit.EMPTY),
                ("in", self.in_, Omit.EMPTY),
                ("scheme", self.scheme, Omit.EMPTY),
                ("bearerFormat", self.bearer_format, Omit.EMPTY),
                ("flows", self.flows, Omit.EMPTY),
                ("openIdConnectUrl", self.open_id_connect_url, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class Components:
    """Reusable objects referenced from elsewhere in the document.

    ``schemas`` may be any mapping of schema names to schemas, or an object
    with a ``to_json()`` method such as a schema registry. It is written
    whenever it is set, even when it holds nothing.
    """

    schemas: Any = None
    responses: dict[str, Response] = field(default_factory=dict)
    parameters: dict[str, Param] = field(default_factory=dict)
    examples: dict[str, Example] = field(default_factory=dict)
    request_bodies: dict[str, RequestBody] = field(default_factory=dict)
    headers: dict[str, Param] = field(default_factory=dict)
    security_schemes: dict[str, SecurityScheme] = field(default_factory=dict)
    links: dict[str, Link] = field(default_factory=dict)
    callbacks: dict[str, PathItem] = field(default_factory=dict)
    path_items: dict[str, PathItem] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for these components."""
        return marshal_fields(
            [
                ("schemas", self.schemas, Omit.NIL),
                ("responses", self.responses, Omit.EMPTY),
                ("parameters", self.parameters, Omit.EMPTY),
                ("examples", self.examples, Omit.EMPTY),
                ("requestBodies", self.request_bodies, Omit.EMPTY),
                ("headers", self.headers, Omit.EMPTY),
                ("securitySchemes", self.security_schemes, Omit.EMPTY),
                ("links", self.links, Omit.EMPTY),
                ("callbacks", self.callbacks, Omit.EMPTY),
                ("pathItems", self.path_items, Omit.EMPTY),
            ],
            self.extensions,
        )