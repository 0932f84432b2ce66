"""Format subscription responses for v2ray clients."""

import base64
import binascii
from typing import List


def format_subscription_response(links: List[str]) -> str:
    """Format subscription response as base64-encoded share links.

    Args:
        links: Share URIs in the order clients should list them

    Returns:
        Base64-encoded string of the URIs separated by blank lines
    """
    text = "\n\n".join(links)
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def parse_subscription_response(encoded: str) -> List[str]:
    """Parse base64-encoded subscription response.

    Helper for testing and debugging.

    Args:
        encoded: Base64-encoded subscription response

    Returns:
        List of share URIs

    Raises:
        ValueError: If response is not valid base64
    """
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid base64 response: {e}")
    return [line.strip() for line in decoded.split("\n") if line.strip()]
