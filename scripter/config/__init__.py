from .logging import get_logging_config

__all__ = ["get_logging_config"]
