"""Document metadata objects: info, contact, license, servers, tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from oasgen.marshal import Omit, marshal_fields


@dataclass
class Contact:
    """Contact information to get support for the API."""

    name: str = ""
    url: str = ""
    email: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this contact."""
        return marshal_fields(
            [
                ("name", self.name, Omit.EMPTY),
                ("url", self.url, Omit.EMPTY),
                ("email", self.email, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class License:
    """License name and link for using the API."""

    name: str = ""
    identifier: str = ""
    url: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this license."""
        return marshal_fields(
            [
                ("name", self.name, Omit.NEVER),
                ("identifier", self.identifier, Omit.EMPTY),
                ("url", self.url, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class Info:
    """Metadata about the API."""

    title: str = ""
    description: str = ""
    terms_of_service: str = ""
    contact: Contact | None = None
    license: License | None = None
    version: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this info block."""
        return marshal_fields(
            [
                ("title", self.title, Omit.NEVER),
                ("description", self.description, Omit.EMPTY),
                ("termsOfService", self.terms_of_service, Omit.EMPTY),
                ("contact", self.contact, Omit.EMPTY),
                ("license", self.license, Omit.EMPTY),
                ("version", self.version, Omit.NEVER),
            ],
            self.extensions,
        )


@dataclass
class ServerVariable:
    """A variable used for server URL template substitution."""

    enum: list[str] = field(default_factory=list)
    default: str = ""
    description: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this server variable."""
        return marshal_fields(
            [
                ("enum", self.enum, Omit.EMPTY),
                ("default", self.default, Omit.NEVER),
                ("description", self.description, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class Server:
    """A server URL, optionally with variables."""

    url: str = ""
    description: str = ""
    variables: dict[str, ServerVariable] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this server."""
        return marshal_fields(
            [
                ("url", self.url, Omit.NEVER),
                ("description", self.description, Omit.EMPTY),
                ("variables", self.variables, Omit.EMPTY),
            ],
            self.extensions,
        )


@dataclass
class ExternalDocs:
    """A reference to external documentation."""

    description: str = ""
    url: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this documentation link."""
        return marshal_fields(
            [
                ("description", self.description, Omit.EMPTY),
                ("url", self.url, Omit.NEVER),
            ],
            self.extensions,
        )


@dataclass
class Tag:
    """Metadata for a single tag used by operations."""

    name: str = ""
    description: str = ""
    external_docs: ExternalDocs | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this tag."""
        return marshal_fields(
            [
                ("name", self.name, Omit.NEVER),
                ("description", self.description, Omit.EMPTY),
                ("externalDocs", self.external_docs, Omit.EMPTY),
            ],
            self.extensions,
        )