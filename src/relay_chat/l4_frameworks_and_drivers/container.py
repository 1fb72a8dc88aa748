"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from relay_chat.l1_entities.config import AppConfig
from relay_chat.l1_entities.message_id import MessageIdGenerator
from relay_chat.l2_use_cases.ports.chat_backend import ChatBackend
from relay_chat.l2_use_cases.ports.config_loader import ConfigLoader
from relay_chat.l2_use_cases.ports.scheduler import Scheduler
from relay_chat.l3_interface_adapters.controllers.chat_controller import ChatController
from relay_chat.l3_interface_adapters.gateways.httpx_chat_backend import HttpxChatBackend
from relay_chat.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from relay_chat.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        backend: ChatBackend | None = None,
    ) -> None:
        self.config = config
        self.infra = infra or InfraConfig()
        self.backend: ChatBackend = backend or HttpxChatBackend(
            url=self.infra.backend.url,
            timeout=self.infra.backend.timeout,
        )

    def build_controller(self, scheduler: Scheduler) -> ChatController:
        """The controller needs the running App as its timer source, so it is built late."""
        return ChatController(
            config=self.config,
            backend=self.backend,
            scheduler=scheduler,
            id_generator=MessageIdGenerator(self.config.chat.id_prefix),
        )

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
