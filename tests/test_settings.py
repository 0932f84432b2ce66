"""Tests for environment settings loading."""

import dataclasses

import pytest

from config.settings import DEFAULT_PLACEHOLDER_DOMAIN, DEFAULT_UUID, Settings, load_settings


class TestDefaults:
    def test_empty_environment(self):
        settings = load_settings({})

        assert settings.uuid == DEFAULT_UUID
        assert settings.name == "Vls"
        assert settings.cfip == "www.visa.com.sg"
        assert settings.cfport == 443
        assert settings.argo_domain == ""
        assert settings.argo_port == 8001
        assert settings.sub_path == "sub"
        assert settings.server_port == 3000
        assert settings.upload_url == ""
        assert settings.project_url == ""
        assert settings.auto_access is False
        assert settings.isp_label == "Cloudflare"
        assert settings.placeholder_domain == DEFAULT_PLACEHOLDER_DOMAIN

    def test_settings_are_immutable(self):
        settings = load_settings({})

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.uuid = "other"


class TestOverrides:
    def test_reads_all_variables(self):
        settings = load_settings({
            "UUID": "abc",
            "NAME": "Node",
            "CFIP": "1.1.1.1",
            "CFPORT": "2053",
            "ARGO_DOMAIN": "t.example.com",
            "ARGO_AUTH": "token",
            "ARGO_PORT": "9001",
            "SUB_PATH": "feed",
            "SERVER_PORT": "8080",
            "UPLOAD_URL": "https://merge.example.com/",
            "PROJECT_URL": "https://app.example.com/",
            "AUTO_ACCESS": "true",
            "ISP": "US-Host",
        })

        assert settings.uuid == "abc"
        assert settings.name == "Node"
        assert settings.cfip == "1.1.1.1"
        assert settings.cfport == 2053
        assert settings.argo_domain == "t.example.com"
        assert settings.argo_auth == "token"
        assert settings.argo_port == 9001
        assert settings.sub_path == "feed"
        assert settings.server_port == 8080
        assert settings.upload_url == "https://merge.example.com"
        assert settings.project_url == "https://app.example.com"
        assert settings.auto_access is True
        assert settings.label == "Node-US-Host"
        assert settings.subscription_url == "https://app.example.com/feed"

    def test_port_fallback_variable(self):
        assert load_settings({"PORT": "5000"}).server_port == 5000
        assert load_settings({"SERVER_PORT": "4000", "PORT": "5000"}).server_port == 4000

    @pytest.mark.parametrize("value", ["TRUE", "1", "yes", ""])
    def test_auto_access_only_literal_true(self, value):
        assert load_settings({"AUTO_ACCESS": value}).auto_access is False

    @pytest.mark.parametrize("value", ["abc", "0", "70000", "-1"])
    def test_invalid_port_uses_default(self, value):
        assert load_settings({"CFPORT": value}).cfport == 443

    def test_sub_path_slashes_stripped(self):
        assert load_settings({"SUB_PATH": "/feed/"}).sub_path == "feed"

    def test_empty_isp_label_kept(self):
        settings = load_settings({"ISP": ""})

        assert settings.label == "Vls-"


def test_label_combines_name_and_isp():
    assert Settings(name="A", isp_label="B").label == "A-B"
