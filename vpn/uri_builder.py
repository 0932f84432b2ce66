"""Share-link builders for the VLESS, VMESS and Trojan endpoints."""

import base64
import json

# Percent-encoded forms of "/vless-argo?ed=2560" and "/trojan-argo?ed=2560".
# Literal on purpose: clients expect exactly these bytes.
VLESS_WS_PATH = "%2Fvless-argo%3Fed%3D2560"
TROJAN_WS_PATH = "%2Ftrojan-argo%3Fed%3D2560"
VMESS_WS_PATH = "/vmess-argo?ed=2560"


def build_vless_uri(uuid: str, host: str, port: int, domain: str, label: str) -> str:
    """Build a VLESS over WebSocket + TLS URI.

    Args:
        uuid: Client UUID
        host: Preferred edge hostname or IP the client dials
        port: Preferred edge port
        domain: Argo tunnel domain (used as SNI and Host header)
        label: Display name for the connection

    Returns:
        VLESS URI string like: vless://uuid@host:port?params#label

    Example:
        >>> build_vless_uri("id", "www.visa.com.sg", 443, "t.example.com", "Vls-CF")
        'vless://id@www.visa.com.sg:443?encryption=none&security=tls&sni=t.example.com&...#Vls-CF'
    """
    return (
        f"vless://{uuid}@{host}:{port}"
        f"?encryption=none&security=tls&sni={domain}"
        f"&type=ws&host={domain}&path={VLESS_WS_PATH}"
        f"#{label}"
    )


def build_vmess_uri(uuid: str, host: str, port: int, domain: str, label: str) -> str:
    """Build a VMESS URI (base64 of the v2rayN JSON share format).

    Args:
        uuid: Client UUID
        host: Preferred edge hostname or IP the client dials
        port: Preferred edge port
        domain: Argo tunnel domain
        label: Display name for the connection

    Returns:
        "vmess://" followed by base64-encoded compact JSON
    """
    vmess = {
        "v": "2",
        "ps": label,
        "add": host,
        "port": port,
        "id": uuid,
        "aid": "0",
        "scy": "none",
        "net": "ws",
        "type": "none",
        "host": domain,
        "path": VMESS_WS_PATH,
        "tls": "tls",
        "sni": domain,
        "alpn": "",
    }
    payload = json.dumps(vmess, separators=(",", ":"), ensure_ascii=False)
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"vmess://{encoded}"


def build_trojan_uri(password: str, host: str, port: int, domain: str, label: str) -> str:
    """Build a Trojan over WebSocket + TLS URI.

    The client UUID doubles as the Trojan password.
    """
    return (
        f"trojan://{password}@{host}:{port}"
        f"?security=tls&sni={domain}"
        f"&type=ws&host={domain}&path={TROJAN_WS_PATH}"
        f"#{label}"
    )


def decode_vmess_uri(uri: str) -> dict:
    """Decode a vmess:// URI back into its JSON object.

    Args:
        uri: VMESS URI string

    Returns:
        Parsed share object

    Raises:
        ValueError: If URI is not a valid vmess:// link
    """
    if not uri.startswith("vmess://"):
        raise ValueError("URI must start with 'vmess://'")

    try:
        raw = base64.b64decode(uri[len("vmess://"):], validate=True)
        return json.loads(raw.decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid vmess payload: {e}")
