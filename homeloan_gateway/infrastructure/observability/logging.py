"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from homeloan_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(
    request_id: str,
    loan_amount: float,
    installment: int,
    is_eligible: bool,
    duration_ms: float,
) -> None:
    """Log structured quote outcome for analysis"""
    logging.info(
        "Quote computed",
        extra={
            "request_id": request_id,
            "step": "quote_complete",
            "loan_amount": loan_amount,
            "installment": installment,
            "eligibility_outcome": "eligible" if is_eligible else "ineligible",
            "duration_ms": duration_ms,
        },
    )


def log_lead(request_id: str, name: str, email: str, received_at: str) -> None:
    """Log an accepted contact form lead"""
    logging.info(
        "New lead received",
        extra={
            "request_id": request_id,
            "step": "lead_received",
            "lead_name": name,
            "lead_email": email,
            "received_at": received_at,
        },
    )


def log_product_fetch(request_id: str, product_id: int, ok: bool, duration_ms: float) -> None:
    logging.info(
        "Product fetched" if ok else "Product fetch failed",
        extra={
            "request_id": request_id,
            "step": "product_fetch",
            "product_id": product_id,
            "duration_ms": duration_ms,
        },
    )
