"""In-memory xray routing config for the Argo entry listener."""

import json

from config.settings import Settings

VLESS_TCP_PORT = 3001
VLESS_WS_PORT = 3002
VMESS_WS_PORT = 3003
TROJAN_WS_PORT = 3004

LOOPBACK = "127.0.0.1"
DNS_SERVER = "https+local://8.8.8.8/dns-query"

_SNIFFING = {
    "enabled": True,
    "destOverride": ["http", "tls", "quic"],
    "metadataOnly": False,
}


def _sniffing() -> dict:
    return {**_SNIFFING, "destOverride": list(_SNIFFING["destOverride"])}


def _entry_inbound(settings: Settings) -> dict:
    # Fallback order is significant: xray tries path matches before the bare default.
    return {
        "port": settings.argo_port,
        "protocol": "vless",
        "settings": {
            "clients": [{"id": settings.uuid, "flow": "xtls-rprx-vision"}],
            "decryption": "none",
            "fallbacks": [
                {"dest": VLESS_TCP_PORT},
                {"path": "/vless-argo", "dest": VLESS_WS_PORT},
                {"path": "/vmess-argo", "dest": VMESS_WS_PORT},
                {"path": "/trojan-argo", "dest": TROJAN_WS_PORT},
            ],
        },
        "streamSettings": {"network": "tcp"},
    }


def build_server_config(settings: Settings) -> dict:
    """Build the xray config document for the given settings.

    The document has one public VLESS listener on ``argo_port`` that
    falls back by WebSocket path to four loopback listeners on fixed
    ports, a single DoH resolver, and direct/block outbounds.

    Args:
        settings: Process settings

    Returns:
        Config as a plain dict, ready for json.dumps
    """
    uuid = settings.uuid
    return {
        "log": {"access": "/dev/null", "error": "/dev/null", "loglevel": "none"},
        "inbounds": [
            _entry_inbound(settings),
            {
                "port": VLESS_TCP_PORT,
                "listen": LOOPBACK,
                "protocol": "vless",
                "settings": {"clients": [{"id": uuid}], "decryption": "none"},
                "streamSettings": {"network": "tcp", "security": "none"},
            },
            {
                "port": VLESS_WS_PORT,
                "listen": LOOPBACK,
                "protocol": "vless",
                "settings": {"clients": [{"id": uuid, "level": 0}], "decryption": "none"},
                "streamSettings": {
                    "network": "ws",
                    "security": "none",
                    "wsSettings": {"path": "/vless-argo"},
                },
                "sniffing": _sniffing(),
            },
            {
                "port": VMESS_WS_PORT,
                "listen": LOOPBACK,
                "protocol": "vmess",
                "settings": {"clients": [{"id": uuid, "alterId": 0}]},
                "streamSettings": {
                    "network": "ws",
                    "wsSettings": {"path": "/vmess-argo"},
                },
                "sniffing": _sniffing(),
            },
            {
                "port": TROJAN_WS_PORT,
                "listen": LOOPBACK,
                "protocol": "trojan",
                "settings": {"clients": [{"password": uuid}]},
                "streamSettings": {
                    "network": "ws",
                    "security": "none",
                    "wsSettings": {"path": "/trojan-argo"},
                },
                "sniffing": _sniffing(),
            },
        ],
        "dns": {"servers": [DNS_SERVER]},
        "outbounds": [
            {"protocol": "freedom", "tag": "direct"},
            {"protocol": "blackhole", "tag": "block"},
        ],
    }


def render_server_config(settings: Settings) -> str:
    """Serialize the config document as indented JSON."""
    return json.dumps(build_server_config(settings), indent=2)
