"""Tests for gateway configuration."""

import pytest

from xpxsdk.config import DEFAULT_BASE_URL, GatewayConfig
from xpxsdk.nem.network import NemNetwork


def test_defaults():
    config = GatewayConfig()
    assert config.base_url == "https://testnet2.gateway.proximax.io/"
    assert config.network is NemNetwork.TEST_NET
    assert config.timeout == 30.0


def test_endpoint_joins_without_double_slash():
    config = GatewayConfig(base_url="http://gw.local:8881/")
    assert config.endpoint("upload/text") == "http://gw.local:8881/upload/text"
    assert GatewayConfig(base_url="http://gw").endpoint("/x") == "http://gw/x"


def test_from_env(monkeypatch):
    monkeypatch.setenv("XPX_GATEWAY_URL", "http://env-gateway/")
    monkeypatch.setenv("XPX_NEM_NETWORK", "MAIN_NET")
    monkeypatch.setenv("XPX_HTTP_TIMEOUT", "12")
    config = GatewayConfig.from_env()
    assert config.base_url == "http://env-gateway/"
    assert config.network is NemNetwork.MAIN_NET
    assert config.timeout == 12.0


def test_from_env_args_win(monkeypatch):
    monkeypatch.setenv("XPX_GATEWAY_URL", "http://env-gateway/")
    monkeypatch.setenv("XPX_NEM_NETWORK", "TEST_NET")
    config = GatewayConfig.from_env(base_url="http://arg/", network=NemNetwork.MAIN_NET)
    assert config.base_url == "http://arg/"
    assert config.network is NemNetwork.MAIN_NET


def test_from_env_defaults(monkeypatch):
    for name in ("XPX_GATEWAY_URL", "XPX_NEM_NETWORK", "XPX_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    config = GatewayConfig.from_env()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.network is NemNetwork.TEST_NET


def test_from_env_keeps_explicit_falsy_args(monkeypatch):
    monkeypatch.setenv("XPX_GATEWAY_URL", "http://env-gateway/")
    monkeypatch.setenv("XPX_HTTP_TIMEOUT", "12")
    config = GatewayConfig.from_env(base_url="", timeout=0)
    assert config.base_url == ""
    assert config.timeout == 0


def test_from_env_rejects_unknown_network(monkeypatch):
    monkeypatch.setenv("XPX_NEM_NETWORK", "MIJIN_NET")
    with pytest.raises(ValueError, match="Unknown NEM network"):
        GatewayConfig.from_env()
