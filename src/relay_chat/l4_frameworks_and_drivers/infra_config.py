"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import BaseModel, Field

from relay_chat.l1_entities.config import AppConfig
from relay_chat.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'animation': {
        'loading_interval': 0.3,
        'typing_interval': 0.02,
        'max_dots': 3,
    },
    'chat': {
        'fallback_text': 'Something went wrong',
        'user_avatar': '👤',
        'assistant_avatar': '🤖',
        'id_prefix': 'id',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, copy.deepcopy(raw))
    return AppConfig.model_validate(merged)


class BackendProviderConfig(BaseModel):
    url: str = 'http://localhost:5000'
    timeout: float = Field(default=60.0, gt=0)


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    backend: BackendProviderConfig = Field(default_factory=BackendProviderConfig)
