"""VPN module for the Argo subscription server.

This module builds the share links handed to clients and the xray
routing config that the tunnel side is expected to run.

Usage:
    from vpn import build_vless_uri, build_server_config

    uri = build_vless_uri(uuid, "www.visa.com.sg", 443, domain, "Vls-Cloudflare")
    config = build_server_config(settings)
"""

from .server_config import build_server_config, render_server_config
from .uri_builder import (
    build_trojan_uri,
    build_vless_uri,
    build_vmess_uri,
    decode_vmess_uri,
)

__all__ = [
    # Share links
    "build_vless_uri",
    "build_vmess_uri",
    "build_trojan_uri",
    "decode_vmess_uri",
    # Server config
    "build_server_config",
    "render_server_config",
]
