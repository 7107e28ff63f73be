"""Core API Manager модули."""

from .config import APIManagerConfig, TimeoutConfig, DEFAULT_SUCCESS_STATUS_RANGE
from .exceptions import (
    APIError,
    InvalidURLError,
    InvalidResponseError,
    DecodingError,
    ServerError,
    CustomError,
)
from .models import RequestSpec, MultipartSpec, HTTPRequest, HTTPResponseEnvelope
from .multipart import encode_multipart_body, generate_boundary, multipart_content_type
from .serializer import Serializer, JSONSerializer
from .transport import Transport, RequestsTransport
from .indicator import Indicator, NullIndicator, CallbackIndicator, indicator_scope
from .response_handler import ResponseHandler
from .api_manager import APIManager, get_shared_manager, set_shared_manager

__all__ = [
    # Config
    "APIManagerConfig",
    "TimeoutConfig",
    "DEFAULT_SUCCESS_STATUS_RANGE",
    # Exceptions
    "APIError",
    "InvalidURLError",
    "InvalidResponseError",
    "DecodingError",
    "ServerError",
    "CustomError",
    # Models
    "RequestSpec",
    "MultipartSpec",
    "HTTPRequest",
    "HTTPResponseEnvelope",
    # Multipart
    "encode_multipart_body",
    "generate_boundary",
    "multipart_content_type",
    # Capabilities
    "Serializer",
    "JSONSerializer",
    "Transport",
    "RequestsTransport",
    "Indicator",
    "NullIndicator",
    "CallbackIndicator",
    "indicator_scope",
    # Pipeline
    "ResponseHandler",
    "APIManager",
    "get_shared_manager",
    "set_shared_manager",
]
