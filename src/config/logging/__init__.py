"""Logging estruturado JSON do roteador HappyPaws.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="happypaws_router")

    logger = get_logger(__name__)
    logger.info("zapi_send_succeeded", extra={"message_id": "3EB0"})

Campos presentes em todo log: timestamp, level, logger, message,
correlation_id e service. Telefones só entram em logs de falha.
"""

from config.logging.config import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    VALID_LOG_LEVELS,
    RequestContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
