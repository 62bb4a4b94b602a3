from .logger_factory_service import LoggerFactoryService, configure_logging

__all__ = [
    "LoggerFactoryService",
    "configure_logging",
]
