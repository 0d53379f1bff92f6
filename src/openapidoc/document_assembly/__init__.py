"""Document assembly exports."""

from .component_merge import COMPONENT_SECTIONS, empty_components, merge_components
from .configured_document import PayloadTargetError, build_configured_document, load_payload
from .document_registry import (
    OPENAPI_VERSION,
    DocumentAssemblyError,
    DocumentRegistry,
    header_components,
    path_parameter,
    request_name,
)
from .document_writer import SUPPORTED_FORMATS, render_document, write_document
from .operation_models import HeaderSpec, PathParam, RequestSpec, ResponseBody, ResponseSpec

__all__ = [
    "COMPONENT_SECTIONS",
    "OPENAPI_VERSION",
    "PayloadTargetError",
    "SUPPORTED_FORMATS",
    "DocumentAssemblyError",
    "DocumentRegistry",
    "HeaderSpec",
    "PathParam",
    "RequestSpec",
    "ResponseBody",
    "ResponseSpec",
    "build_configured_document",
    "empty_components",
    "header_components",
    "load_payload",
    "merge_components",
    "path_parameter",
    "render_document",
    "request_name",
    "write_document",
]
