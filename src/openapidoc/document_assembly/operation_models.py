"""Request, response and header builders for document assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HeaderSpec:
    """One HTTP header shared by requests and responses."""

    name: str
    value: str
    description: str = ""
    required: bool = False


@dataclass(frozen=True)
class PathParam:
    """One path parameter; always required and rendered with the ``simple`` style."""

    name: str
    value: Any
    description: str = ""


@dataclass(frozen=True)
class ResponseBody:
    """Example payload of a response for one content type."""

    data: Any
    schema_name: str | None = None


@dataclass
class RequestSpec:
    """Request payloads, headers and path parameters of one operation.

    One instance describes exactly one method and path.
    """

    bodies: dict[str, Any] = field(default_factory=dict)
    headers: list[HeaderSpec] = field(default_factory=list)
    path_params: list[PathParam] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)
    required: bool = False

    def body(self, content_type: str, data: Any) -> RequestSpec:
        self.bodies[content_type] = data
        return self

    def header(self, header: HeaderSpec) -> RequestSpec:
        self.headers.append(header)
        return self

    def path_param(self, *params: PathParam) -> RequestSpec:
        self.path_params.extend(params)
        return self

    def describe(self, description: str) -> RequestSpec:
        """Append one paragraph to the request description."""
        self.descriptions.append(description)
        return self

    def mark_required(self, required: bool = True) -> RequestSpec:
        self.required = required
        return self

    @property
    def description(self) -> str:
        return "\n\n".join(self.descriptions)


@dataclass
class ResponseSpec:
    """Response payloads and headers for one status code."""

    bodies: dict[str, ResponseBody] = field(default_factory=dict)
    headers: list[HeaderSpec] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)

    def body(self, content_type: str, data: Any, schema_name: str | None = None) -> ResponseSpec:
        """Set the payload for ``content_type``; a later call for the same type replaces it."""
        name = schema_name.replace("\n", "").strip() if schema_name else None
        self.bodies[content_type] = ResponseBody(data=data, schema_name=name or None)
        return self

    def header(self, header: HeaderSpec) -> ResponseSpec:
        self.headers.append(header)
        return self

    def describe(self, description: str) -> ResponseSpec:
        self.descriptions.append(description)
        return self

    @property
    def description(self) -> str:
        return "\n\n".join(self.descriptions)
