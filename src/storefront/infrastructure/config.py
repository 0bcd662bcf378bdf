"""Deployment configuration for the storefront.

Settings live in ``config/storefront.yml``. Each named deployment says
where orders are sent (WhatsApp number, order mailbox) and which email
flow the page offers. Environment variables pick the file and the
deployment:

    STOREFRONT_CONFIG      path to the YAML file
    STOREFRONT_DEPLOYMENT  deployment name (defaults to ``default_deployment``)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from storefront.domain.service.delivery_dispatcher import DispatchTarget, EmailStrategy

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "storefront.yml"


class DeploymentConfig(BaseModel):
    """Order destinations for one deployment"""

    store_name: str = "HHMI Brothers"
    currency: str = "PKR"
    whatsapp_phone: str = Field(min_length=1)
    whatsapp_host: str = "wa.me"
    order_email: str = Field(min_length=3)
    email_strategy: EmailStrategy = EmailStrategy.MAILTO
    webmail_host: str = "mail.google.com"
    sizes: list[str] = Field(default_factory=lambda: ["S", "M", "L", "XL", "XXL"])

    def dispatch_target(self) -> DispatchTarget:
        return DispatchTarget(
            whatsapp_phone=self.whatsapp_phone,
            order_email=self.order_email,
            store_name=self.store_name,
            email_strategy=self.email_strategy,
            whatsapp_host=self.whatsapp_host,
            webmail_host=self.webmail_host,
        )


class StorefrontSettings(BaseModel):
    """Complete storefront configuration"""

    default_deployment: str
    data_dir: str = "data"
    catalog_file: str = "products.json"
    preferences_file: str = "preferences.json"
    deployments: dict[str, DeploymentConfig]

    def deployment(self, name: str | None = None) -> DeploymentConfig:
        name = name or os.environ.get("STOREFRONT_DEPLOYMENT") or self.default_deployment
        if name not in self.deployments:
            raise ValueError(
                f"Deployment '{name}' not found; known: {', '.join(sorted(self.deployments))}"
            )
        return self.deployments[name]

    def resolve_data_dir(self, base: Path = PROJECT_ROOT) -> Path:
        override = os.environ.get("STOREFRONT_DATA_DIR")
        data_dir = Path(override) if override else Path(self.data_dir)
        return data_dir if data_dir.is_absolute() else base / data_dir


def load_settings(config_path: Path | None = None) -> StorefrontSettings:
    """Load and validate the storefront YAML.

    Without *config_path* the file comes from $STOREFRONT_CONFIG, then
    config/storefront.yml. Raises FileNotFoundError for a missing file
    and pydantic.ValidationError when the schema does not match.
    """
    if config_path is None:
        env_path = os.environ.get("STOREFRONT_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        settings = StorefrontSettings(**config_data)
        logger.info("Loaded config from %s", config_path)
        return settings
    except ValidationError as e:
        logger.error("Config validation failed: %s", e)
        raise
