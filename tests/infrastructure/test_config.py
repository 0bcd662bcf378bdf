"""Tests for YAML deployment configuration."""

import logging

import pydantic
import pytest

from storefront.domain.service.delivery_dispatcher import EmailStrategy
from storefront.infrastructure.config import DEFAULT_CONFIG_PATH, load_settings

MINIMAL = """
default_deployment: shop
deployments:
  shop:
    whatsapp_phone: "+92 300 0000000"
    order_email: shop@example.com
"""


class TestLoadSettings:

    def test_shipped_config_has_both_email_flows(self):
        settings = load_settings(DEFAULT_CONFIG_PATH)
        strategies = {d.email_strategy for d in settings.deployments.values()}
        assert strategies == {EmailStrategy.MAILTO, EmailStrategy.CLIPBOARD}

    def test_defaults_applied(self, tmp_path):
        path = tmp_path / "storefront.yml"
        path.write_text(MINIMAL, encoding="utf-8")
        deployment = load_settings(path).deployment()
        assert deployment.store_name == "HHMI Brothers"
        assert deployment.email_strategy is EmailStrategy.MAILTO
        assert deployment.sizes == ["S", "M", "L", "XL", "XXL"]

    def test_dispatch_target(self, tmp_path):
        path = tmp_path / "storefront.yml"
        path.write_text(MINIMAL, encoding="utf-8")
        target = load_settings(path).deployment("shop").dispatch_target()
        assert target.whatsapp_digits == "923000000000"
        assert target.order_email == "shop@example.com"

    def test_env_selects_config_and_deployment(self, tmp_path, monkeypatch):
        path = tmp_path / "storefront.yml"
        path.write_text(
            MINIMAL + "  other:\n    whatsapp_phone: '1'\n    order_email: o@x.io\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("STOREFRONT_CONFIG", str(path))
        monkeypatch.setenv("STOREFRONT_DEPLOYMENT", "other")
        assert load_settings().deployment().order_email == "o@x.io"

    def test_unknown_deployment(self, tmp_path):
        path = tmp_path / "storefront.yml"
        path.write_text(MINIMAL, encoding="utf-8")
        with pytest.raises(ValueError, match="Deployment 'nope' not found"):
            load_settings(path).deployment("nope")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.yml")

    def test_load_is_logged_with_path(self, tmp_path, caplog):
        path = tmp_path / "storefront.yml"
        path.write_text(MINIMAL, encoding="utf-8")
        caplog.set_level(logging.INFO, logger="storefront.infrastructure.config")
        load_settings(path)
        assert f"Loaded config from {path}" in caplog.messages

    def test_invalid_strategy_rejected(self, tmp_path):
        path = tmp_path / "storefront.yml"
        path.write_text(MINIMAL + "    email_strategy: pigeon\n", encoding="utf-8")
        with pytest.raises(pydantic.ValidationError):
            load_settings(path)

    def test_data_dir_override(self, tmp_path, monkeypatch):
        path = tmp_path / "storefront.yml"
        path.write_text(MINIMAL, encoding="utf-8")
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path / "data"))
        assert load_settings(path).resolve_data_dir() == tmp_path / "data"
