"""Configuration settings loader for the Argo subscription server."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_UUID = '9afd1229-b893-40c1-84dd-51e7ce204913'
DEFAULT_NAME = 'Vls'
DEFAULT_CFIP = 'www.visa.com.sg'
DEFAULT_CFPORT = 443
DEFAULT_ARGO_PORT = 8001
DEFAULT_SERVER_PORT = 3000
DEFAULT_SUB_PATH = 'sub'
DEFAULT_ISP_LABEL = 'Cloudflare'
DEFAULT_PLACEHOLDER_DOMAIN = 'your-temporary-argo-domain.trycloudflare.com'


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once before the server starts."""

    uuid: str = DEFAULT_UUID
    name: str = DEFAULT_NAME
    cfip: str = DEFAULT_CFIP
    cfport: int = DEFAULT_CFPORT
    argo_domain: str = ''
    argo_auth: str = ''
    argo_port: int = DEFAULT_ARGO_PORT
    sub_path: str = DEFAULT_SUB_PATH
    server_port: int = DEFAULT_SERVER_PORT
    upload_url: str = ''
    project_url: str = ''
    auto_access: bool = False
    isp_label: str = DEFAULT_ISP_LABEL
    placeholder_domain: str = DEFAULT_PLACEHOLDER_DOMAIN

    @property
    def subscription_url(self) -> str:
        """Public URL of the subscription endpoint."""
        return f"{self.project_url}/{self.sub_path}"

    @property
    def label(self) -> str:
        """Remark shown by clients for every generated link."""
        return f"{self.name}-{self.isp_label}"


def _port(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, '')
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {key}={raw!r}, using default {default}")
        return default
    if not 1 <= value <= 65535:
        logger.warning(f"{key}={value} out of range, using default {default}")
        return default
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of os.environ (a .env file is
            only loaded when reading the real environment)

    Returns:
        Immutable Settings instance
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    server_port_key = 'SERVER_PORT' if environ.get('SERVER_PORT') else 'PORT'

    return Settings(
        uuid=environ.get('UUID') or DEFAULT_UUID,
        name=environ.get('NAME') or DEFAULT_NAME,
        cfip=environ.get('CFIP') or DEFAULT_CFIP,
        cfport=_port(environ, 'CFPORT', DEFAULT_CFPORT),
        argo_domain=environ.get('ARGO_DOMAIN', '').strip(),
        argo_auth=environ.get('ARGO_AUTH', ''),
        argo_port=_port(environ, 'ARGO_PORT', DEFAULT_ARGO_PORT),
        sub_path=environ.get('SUB_PATH', '').strip('/') or DEFAULT_SUB_PATH,
        server_port=_port(environ, server_port_key, DEFAULT_SERVER_PORT),
        upload_url=environ.get('UPLOAD_URL', '').rstrip('/'),
        project_url=environ.get('PROJECT_URL', '').rstrip('/'),
        auto_access=environ.get('AUTO_ACCESS') == 'true',
        isp_label=environ.get('ISP', DEFAULT_ISP_LABEL),
        placeholder_domain=(
            environ.get('ARGO_PLACEHOLDER_DOMAIN') or DEFAULT_PLACEHOLDER_DOMAIN
        ),
    )
