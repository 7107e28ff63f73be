"""API Manager - typed HTTP request pipeline with multipart uploads."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .core.api_manager import APIManager, get_shared_manager, set_shared_manager

# Опциональный импорт AsyncAPIManager (требует httpx)
try:
    from .async_manager import AsyncAPIManager, AsyncTransport, HTTPXTransport
    _HAS_ASYNC = True
except ImportError:
    _HAS_ASYNC = False
    AsyncAPIManager = None  # type: ignore
    AsyncTransport = None  # type: ignore
    HTTPXTransport = None  # type: ignore
from .core.config import APIManagerConfig, TimeoutConfig
from .core.env_config import load_from_env
from .core.exceptions import (
    APIError,
    InvalidURLError,
    InvalidResponseError,
    DecodingError,
    ServerError,
    CustomError,
)
from .core.indicator import Indicator, NullIndicator, CallbackIndicator
from .core.logging import LoggingConfig
from .core.models import RequestSpec, MultipartSpec, HTTPRequest, HTTPResponseEnvelope
from .core.multipart import encode_multipart_body, generate_boundary
from .core.serializer import Serializer, JSONSerializer
from .core.transport import Transport, RequestsTransport
from .validators import (
    EmailValidator,
    PasswordRules,
    PasswordValidationResult,
    PasswordValidator,
)

# NullHandler prevents "No handler found" warnings.
# Configure via logging.getLogger('api_manager') or APIManagerConfig.logging
logging.getLogger('api_manager').addHandler(logging.NullHandler())

try:
    __version__ = version("api-manager")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__all__ = [
    # Pipeline
    "APIManager",
    "AsyncAPIManager",
    "get_shared_manager",
    "set_shared_manager",

    # Config
    "APIManagerConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "load_from_env",

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

    # Capabilities
    "Transport",
    "RequestsTransport",
    "AsyncTransport",
    "HTTPXTransport",
    "Serializer",
    "JSONSerializer",
    "Indicator",
    "NullIndicator",
    "CallbackIndicator",

    # Multipart
    "encode_multipart_body",
    "generate_boundary",

    # Validators
    "EmailValidator",
    "PasswordRules",
    "PasswordValidationResult",
    "PasswordValidator",

    # Version
    "__version__",
]
