from .logger_factory_service import LoggerFactoryService, build_logger, configure_logging, get_logger
from .redaction_service import redact_dict, redact_text

__all__ = [
    "LoggerFactoryService",
    "build_logger",
    "configure_logging",
    "get_logger",
    "redact_dict",
    "redact_text",
]
