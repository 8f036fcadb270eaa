"""Configuração do cliente: settings de ambiente e logging estruturado."""

from mailchimp_api.config.settings import (
    MailChimpSettings,
    create_mailchimp_client,
    get_mailchimp_settings,
)

__all__ = [
    "MailChimpSettings",
    "create_mailchimp_client",
    "get_mailchimp_settings",
]
