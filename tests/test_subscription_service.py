"""Tests for domain resolution, payload formatting and SubscriptionService."""

import base64
import logging

import pytest

from config.settings import DEFAULT_PLACEHOLDER_DOMAIN, Settings, load_settings
from services.subscription_service import SubscriptionService, resolve_domain
from subscription.formatter import format_subscription_response, parse_subscription_response
from vpn.uri_builder import decode_vmess_uri

UUID = "9afd1229-b893-40c1-84dd-51e7ce204913"


@pytest.fixture
def settings():
    return load_settings({
        "UUID": UUID,
        "CFIP": "www.visa.com.sg",
        "CFPORT": "443",
        "ARGO_DOMAIN": "tunnel.example.com",
        "NAME": "Vls",
    })


class TestResolveDomain:
    def test_returns_configured_domain(self):
        assert resolve_domain("x.example.com") == "x.example.com"

    def test_empty_uses_placeholder(self):
        assert resolve_domain("") == DEFAULT_PLACEHOLDER_DOMAIN

    def test_empty_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            resolve_domain("")

        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_custom_placeholder(self):
        assert resolve_domain("", "fallback.example.com") == "fallback.example.com"


class TestFormatter:
    def test_combine_order_and_separation(self):
        decoded = base64.b64decode(format_subscription_response(["A", "B", "C"])).decode()

        assert decoded == "A\n\nB\n\nC"
        assert decoded.index("A") < decoded.index("B") < decoded.index("C")

    def test_parse_roundtrip_drops_blank_lines(self):
        assert parse_subscription_response(format_subscription_response(["A", "B", "C"])) == [
            "A", "B", "C",
        ]

    def test_parse_rejects_invalid_base64(self):
        with pytest.raises(ValueError, match="Invalid base64"):
            parse_subscription_response("%%%")


class TestSubscriptionService:
    def test_links_in_fixed_order(self, settings):
        links = SubscriptionService(settings).build_links()

        assert [link.split("://")[0] for link in links] == ["vless", "vmess", "trojan"]

    def test_payload_contains_expected_links(self, settings):
        """Decoded payload should carry VLESS and Trojan links for the preferred edge."""
        decoded = base64.b64decode(SubscriptionService(settings).build()).decode()

        assert f"vless://{UUID}@www.visa.com.sg:443" in decoded
        assert f"trojan://{UUID}@www.visa.com.sg:443" in decoded
        assert "sni=tunnel.example.com" in decoded
        assert "#Vls-Cloudflare" in decoded

    def test_vmess_carries_settings(self, settings):
        vmess = SubscriptionService(settings).build_links()[1]
        obj = decode_vmess_uri(vmess)

        assert obj["add"] == "www.visa.com.sg"
        assert obj["port"] == 443
        assert obj["id"] == UUID
        assert obj["host"] == "tunnel.example.com"

    def test_deterministic(self, settings):
        service = SubscriptionService(settings)

        assert service.build() == service.build()

    def test_placeholder_when_domain_missing(self):
        service = SubscriptionService(Settings(placeholder_domain="ph.example.com"))

        links = service.build_links()

        assert "sni=ph.example.com" in links[0]
        assert decode_vmess_uri(links[1])["sni"] == "ph.example.com"
