"""Subscription server package for serving share links to v2ray clients.

The FastAPI app lives in subscription.app and is imported from there,
since it depends on the services package which depends on the formatter.
"""

from subscription.formatter import (
    format_subscription_response,
    parse_subscription_response,
)

__all__ = [
    "format_subscription_response",
    "parse_subscription_response",
]
