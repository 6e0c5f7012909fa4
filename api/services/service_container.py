"""
Service Container for dependency injection and service management.
Provides centralized service initialization for the API layer.
"""
from typing import Any, Dict, Optional

from telemetry import get_logger


class ServiceContainer:
    """
    Simple dependency injection container for API services.

    Services are built once per process on first use. Model providers inside
    the generators are created lazily, so a missing credential surfaces on
    the request that needs it rather than at startup.
    """

    def __init__(self):
        self.logger = get_logger(__name__)
        self._services: Dict[str, Any] = {}
        self._initialized = False

    def initialize(self) -> None:
        """Initialize all required services for the API layer."""
        if self._initialized:
            return

        self.logger.info("Initializing API service container...")

        self._initialize_core_services()
        self._initialize_api_services()

        self._initialized = True
        self.logger.info("✅ API service container initialized")

    def _initialize_core_services(self) -> None:
        from ai_utils.config import get_config
        from script_engine.generator import ScriptGenerator
        from script_engine.picks import PicksScriptGenerator
        from video_processor.processors import TranscriptSourceChain

        config = get_config()
        self._services['config'] = config
        self._services['transcript_chain'] = TranscriptSourceChain()
        self._services['script_generator'] = ScriptGenerator(config=config)
        self._services['picks_generator'] = PicksScriptGenerator(config=config)

    def _initialize_api_services(self) -> None:
        from .response_service import ResponseService

        self._services['response'] = ResponseService()

    def get_service(self, service_name: str) -> Any:
        """
        Get a service by name.

        Raises:
            ValueError: If service not found
        """
        if not self._initialized:
            self.initialize()

        if service_name not in self._services:
            available = list(self._services.keys())
            raise ValueError(f"Service '{service_name}' not found. Available: {available}")

        return self._services[service_name]

    def reset(self) -> None:
        """Drop built services (used after configuration changes)."""
        self._services.clear()
        self._initialized = False


_container: Optional[ServiceContainer] = None


def get_service_container() -> ServiceContainer:
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container
