"""Subscription payload assembly."""

import logging
from typing import List

from config.settings import DEFAULT_PLACEHOLDER_DOMAIN, Settings
from subscription.formatter import format_subscription_response
from vpn.uri_builder import build_trojan_uri, build_vless_uri, build_vmess_uri

logger = logging.getLogger(__name__)


def resolve_domain(argo_domain: str, placeholder: str = DEFAULT_PLACEHOLDER_DOMAIN) -> str:
    """Return the public tunnel domain, or the placeholder when none is set.

    A temporary tunnel domain can only be learned from the tunnel process,
    which does not run here, so links built from the placeholder will not
    connect until ARGO_DOMAIN is configured.
    """
    if argo_domain:
        logger.debug(f"Using ARGO_DOMAIN: {argo_domain}")
        return argo_domain

    logger.warning(
        f"ARGO_DOMAIN is not set, falling back to {placeholder}. "
        "Subscription links will not be usable."
    )
    return placeholder


class SubscriptionService:
    """Builds the subscription payload from immutable settings."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_links(self) -> List[str]:
        """Return the VLESS, VMESS and Trojan URIs, in that order."""
        s = self.settings
        domain = resolve_domain(s.argo_domain, s.placeholder_domain)
        args = (s.uuid, s.cfip, s.cfport, domain, s.label)
        return [
            build_vless_uri(*args),
            build_vmess_uri(*args),
            build_trojan_uri(*args),
        ]

    def build(self) -> str:
        """Return the base64 subscription body. Recomputed on every call."""
        return format_subscription_response(self.build_links())
