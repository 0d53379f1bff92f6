"""Assemble generated schemas and operations into one OpenAPI document."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from openapidoc.configuration.runtime_settings import DocumentSettings
from openapidoc.schema_generation import (
    SchemaGenerationError,
    SchemaGenerator,
    SchemaKind,
    SchemaRegistry,
    ValueKind,
    classify,
)

from .component_merge import Components, component_ref, empty_components, merge_components
from .operation_models import HeaderSpec, PathParam, RequestSpec, ResponseSpec

OPENAPI_VERSION = "3.0.3"

_LOGGER = logging.getLogger("openapidoc.document")
_LOGGER.addHandler(logging.NullHandler())

_PARAM_TYPES = {
    ValueKind.INTEGER: SchemaKind.INTEGER,
    ValueKind.NUMBER: SchemaKind.NUMBER,
    ValueKind.BOOLEAN: SchemaKind.BOOLEAN,
}


class DocumentAssemblyError(Exception):
    """Raised from ``build`` when one or more operations could not be added."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = tuple(messages)
        super().__init__("; ".join(self.messages))


def request_name(method: str, path: str) -> str:
    """Return the 32-bit FNV-1 hash of ``METHOD.path`` used to name request components."""
    digest = 0x811C9DC5
    for byte in f"{method}.{path}".encode():
        digest = (digest * 0x01000193) & 0xFFFFFFFF
        digest ^= byte
    return str(digest)


class DocumentRegistry:
    """Collect operations and their components into one document.

    Every payload is generated with the same generator into one shared schema
    registry, so a type used by several operations yields one component schema.
    """

    def __init__(
        self,
        settings: DocumentSettings | None = None,
        generator: SchemaGenerator | None = None,
    ) -> None:
        self._settings = settings or DocumentSettings()
        self._generator = generator or SchemaGenerator()
        self._schemas = SchemaRegistry()
        self._components = empty_components()
        self._paths: dict[str, dict[str, Any]] = {}
        self._errors: list[str] = []

    def add(
        self,
        method: str,
        path: str,
        request: RequestSpec | None,
        responses: Mapping[str, ResponseSpec] | None,
    ) -> None:
        """Register one operation.

        Args:
          method: HTTP method such as GET or POST.
          path: URL path such as /api/v1/pets.
          request: Request body, headers and path parameters; None for none.
          responses: Response per HTTP status code, for example {"200": ResponseSpec()}.

        Errors are collected and raised together by ``build``.
        """
        method = method.upper()
        if not responses:
            self._errors.append(f"{method} {path} must define at least one response.")
            return

        name = request_name(method, path)
        operation: dict[str, Any] = {}
        try:
            if request is not None:
                parameters = self._add_request(request, name, operation)
                if parameters:
                    operation["parameters"] = parameters
            operation_responses = {}
            for http_code, response in responses.items():
                if response is None:
                    continue
                code = str(http_code).upper()
                operation_responses[code] = self._add_response(response, name, code)
        except SchemaGenerationError as exc:
            self._errors.append(f"cannot create components for {method} {path}: {exc}")
            return

        operation["responses"] = operation_responses
        self._paths.setdefault(path, {})[method.lower()] = operation
        _LOGGER.debug("added operation %s %s as %s", method, path, name)

    def build(self) -> dict[str, Any]:
        """Return the assembled OpenAPI document."""
        if self._errors:
            raise DocumentAssemblyError(self._errors)

        components = empty_components()
        components["schemas"] = {
            schema_name: fragment.to_openapi()
            for schema_name, fragment in self._schemas.as_dict().items()
        }
        merge_components(components, self._components)

        info = {"title": self._settings.title, "version": self._settings.version}
        if self._settings.description:
            info["description"] = self._settings.description
        servers = []
        for server in self._settings.servers:
            entry = {"url": server.url}
            if server.description:
                entry["description"] = server.description
            servers.append(entry)

        return {
            "openapi": OPENAPI_VERSION,
            "info": info,
            "servers": servers,
            "paths": self._paths,
            "components": {section: entries for section, entries in components.items() if entries},
        }

    def _add_request(
        self, request: RequestSpec, name: str, operation: dict[str, Any]
    ) -> list[dict[str, str]]:
        parameters = []
        for header in request.headers:
            merge_components(self._components, header_components(header))
            parameters.append(component_ref("parameters", f"headerParam.{header.name}"))

        for param in request.path_params:
            param_name = f"pathParam.{name}.{param.name}"
            self._components["parameters"][param_name] = path_parameter(param)
            parameters.append(component_ref("parameters", param_name))

        if request.bodies:
            content = {
                content_type: {"schema": self._body_schema(data, None)}
                for content_type, data in request.bodies.items()
            }
            body: dict[str, Any] = {"content": content, "required": request.required}
            if request.description:
                body["description"] = request.description
            self._components["requestBodies"][name] = body
            operation["requestBody"] = component_ref("requestBodies", name)
        return parameters

    def _add_response(self, response: ResponseSpec, name: str, code: str) -> dict[str, str]:
        headers = {}
        for header in response.headers:
            merge_components(self._components, header_components(header))
            headers[header.name] = component_ref("headers", header.name)

        rendered: dict[str, Any] = {"description": response.description}
        if headers:
            rendered["headers"] = headers
        if response.bodies:
            rendered["content"] = {
                content_type: {"schema": self._body_schema(body.data, body.schema_name)}
                for content_type, body in response.bodies.items()
            }

        response_name = f"{name}-{code}"
        self._components["responses"][response_name] = rendered
        return component_ref("responses", response_name)

    def _body_schema(self, data: Any, schema_name: str | None) -> dict[str, str]:
        out = self._generator.generate(data, self._schemas)
        if schema_name is None or schema_name == out.parent_schema_name:
            return component_ref("schemas", out.parent_schema_name)
        self._components["schemas"][schema_name] = self._schemas.get(
            out.parent_schema_name
        ).to_openapi()
        return component_ref("schemas", schema_name)


def header_components(header: HeaderSpec) -> Components:
    """Build the schema, response header and request parameter for one header."""
    schema_name = f"headerSchema.{header.name}"
    schema = {
        "type": SchemaKind.STRING.value,
        "title": f"header.{header.name}",
        "example": header.value,
    }
    if header.description:
        schema["description"] = f"[header properties] {header.description}"

    components = empty_components()
    components["schemas"][schema_name] = schema
    components["headers"][header.name] = {
        "description": header.description,
        "schema": component_ref("schemas", schema_name),
    }
    components["parameters"][f"headerParam.{header.name}"] = {
        "in": "header",
        "name": header.name,
        "description": header.description,
        "required": header.required,
        "schema": component_ref("schemas", schema_name),
    }
    return components


def path_parameter(param: PathParam) -> dict[str, Any]:
    """Render a path parameter; only scalar types are allowed in paths."""
    param_type = _PARAM_TYPES.get(classify(param.value), SchemaKind.STRING)
    return {
        "in": "path",
        "name": param.name,
        "description": param.description,
        "example": param.value,
        "required": True,
        "style": "simple",
        "schema": {"type": param_type.value},
    }
