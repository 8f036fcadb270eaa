"""Cliente assíncrono para a API MailChimp Marketing v3."""

__version__ = "1.0.0"

from mailchimp_api.client import (  # noqa: E402
    API_URL_TEMPLATE,
    BODY_METHODS,
    VALID_METHODS,
    MailChimpClient,
)
from mailchimp_api.config import (  # noqa: E402
    MailChimpSettings,
    create_mailchimp_client,
    get_mailchimp_settings,
)
from mailchimp_api.errors import (  # noqa: E402
    InvalidArgumentError,
    InvalidCredentialError,
    MailChimpError,
    ResponseError,
    TransportError,
    UnsupportedMethodError,
)
from mailchimp_api.options import RequestArgs, RequestOptions  # noqa: E402
from mailchimp_api.protocols import RawResponse, TransportProtocol  # noqa: E402
from mailchimp_api.response import MailChimpResponse, format_response  # noqa: E402
from mailchimp_api.transport import HttpxTransport  # noqa: E402

__all__ = [
    "API_URL_TEMPLATE",
    "BODY_METHODS",
    "VALID_METHODS",
    "HttpxTransport",
    "InvalidArgumentError",
    "InvalidCredentialError",
    "MailChimpClient",
    "MailChimpError",
    "MailChimpResponse",
    "MailChimpSettings",
    "RawResponse",
    "RequestArgs",
    "RequestOptions",
    "ResponseError",
    "TransportError",
    "TransportProtocol",
    "UnsupportedMethodError",
    "__version__",
    "create_mailchimp_client",
    "get_mailchimp_settings",
]
