"""Exceções públicas do cliente MailChimp."""

from .exceptions import (
    InvalidArgumentError,
    InvalidCredentialError,
    MailChimpError,
    ResponseError,
    TransportError,
    UnsupportedMethodError,
    expects_type_message,
)

__all__ = [
    "InvalidArgumentError",
    "InvalidCredentialError",
    "MailChimpError",
    "ResponseError",
    "TransportError",
    "UnsupportedMethodError",
    "expects_type_message",
]
