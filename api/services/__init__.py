"""
API Services Module

Available services:
- ResponseService: Response formatting and error payloads
- ServiceContainer: Dependency injection and service management
"""

from .response_service import ResponseService
from .service_container import ServiceContainer, get_service_container

__all__ = [
    "ResponseService",
    "ServiceContainer",
    "get_service_container",
]
