"""
yatranslate - Yandex Translate client

List translation directions, detect languages and translate text
through the Yandex Translate JSON API.
"""

from yatranslate.client import Client, LanguageList, TranslateRequest
from yatranslate.config import DEFAULT_URL, ClientConfig
from yatranslate.errors import (
    ApiError,
    MalformedResponseError,
    MissingKeyError,
    TranslateError,
)
from yatranslate.languages import (
    EN,
    RU,
    UNKNOWN,
    format_direction,
    parse_direction,
)
from yatranslate.transport import RequestsTransport, Transport

__version__ = "0.1.0"

__all__ = [
    # Main class
    "Client",
    # Config
    "ClientConfig",
    "DEFAULT_URL",
    # Requests and results
    "LanguageList",
    "TranslateRequest",
    # Transports
    "RequestsTransport",
    "Transport",
    # Errors
    "ApiError",
    "MalformedResponseError",
    "MissingKeyError",
    "TranslateError",
    # Language utilities
    "EN",
    "RU",
    "UNKNOWN",
    "format_direction",
    "parse_direction",
    # Version
    "__version__",
]
