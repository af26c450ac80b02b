"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping UTC time, level and the configured service name"""

    def __init__(self, *args: Any, service_name: str = "exitum-gateway", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "exitum-gateway") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(request_id: str, calculator: str, inputs: Dict[str, Any], result: Dict[str, Any]) -> None:
    """Log calculator inputs and outputs for analysis"""
    logging.info(
        "Calculation completed",
        extra={
            "request_id": request_id,
            "step": "calculation_complete",
            "calculator": calculator,
            "inputs": inputs,
            "result": result,
        },
    )


def log_chat(
    request_id: str,
    outcome: str,
    lead_captured: bool,
    context_topics: List[str],
    duration_ms: float,
) -> None:
    """Log chat outcome without the visitor message text"""
    logging.info(
        "Chat reply served",
        extra={
            "request_id": request_id,
            "step": "chat_complete",
            "outcome": outcome,
            "lead_captured": lead_captured,
            "context_topics": context_topics,
            "duration_ms": duration_ms,
        },
    )
