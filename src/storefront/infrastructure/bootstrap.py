"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.application.session import StorefrontSession
from storefront.infrastructure.config import StorefrontSettings, load_settings
from storefront.infrastructure.persistence.json_preference_repository import (
    JsonPreferenceRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@lru_cache(maxsize=1)
def settings() -> StorefrontSettings:
    return load_settings()


def product_repository(deployment: str | None = None) -> JsonProductRepository:
    cfg = settings()
    return JsonProductRepository(
        cfg.resolve_data_dir() / cfg.catalog_file,
        currency=cfg.deployment(deployment).currency,
    )


def preference_repository() -> JsonPreferenceRepository:
    cfg = settings()
    return JsonPreferenceRepository(cfg.resolve_data_dir() / cfg.preferences_file)


def storefront_session(deployment: str | None = None) -> StorefrontSession:
    cfg = settings().deployment(deployment)
    return StorefrontSession(
        product_repository(deployment),
        cfg.dispatch_target(),
        sizes=cfg.sizes,
    )
