"""Build documents from configuration files and importable example values."""

from __future__ import annotations

import importlib
from typing import Any

from openapidoc.configuration.runtime_settings import Configuration, PayloadTarget
from openapidoc.schema_generation import SchemaGenerator

from .document_registry import DocumentRegistry
from .operation_models import RequestSpec, ResponseSpec


class PayloadTargetError(Exception):
    """Raised when a ``module:attribute`` target cannot be resolved."""


def load_payload(target: str) -> Any:
    """Import ``module:attribute`` and return its value.

    A callable attribute that is not a class is called without arguments and
    its return value is used.
    """
    module_name, _, attribute_path = target.partition(":")
    if not module_name or not attribute_path:
        raise PayloadTargetError(f"Target must look like 'module:attribute': {target}")
    try:
        value: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise PayloadTargetError(f"Cannot import module '{module_name}': {exc}") from exc
    for attribute in attribute_path.split("."):
        try:
            value = getattr(value, attribute)
        except AttributeError as exc:
            raise PayloadTargetError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc
    if callable(value) and not isinstance(value, type):
        value = value()
    return value


def build_configured_document(configuration: Configuration) -> dict[str, Any]:
    """Assemble the document described by the configured routes."""
    registry = DocumentRegistry(
        settings=configuration.document,
        generator=SchemaGenerator(configuration.generator),
    )
    for route in configuration.routes:
        request = None
        if route.request is not None:
            request = RequestSpec().body(
                route.request.content_type, load_payload(route.request.target)
            )
            request.mark_required(route.request_required)
            if route.request.description:
                request.describe(route.request.description)
        responses = {code: _response_spec(payload) for code, payload in route.responses}
        registry.add(route.method, route.path, request, responses)
    return registry.build()


def _response_spec(payload: PayloadTarget) -> ResponseSpec:
    response = ResponseSpec().body(
        payload.content_type, load_payload(payload.target), schema_name=payload.schema_name
    )
    if payload.description:
        response.describe(payload.description)
    return response
