"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger import jsonlogger

from lending_engine.config import settings


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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_assessment(
    request_id: str,
    risk_level: str,
    risk_score: float,
    factors: List[str],
    duration_ms: float,
) -> None:
    """Log lender risk assessment outcome"""
    logging.info(
        "Risk assessment completed",
        extra={
            "request_id": request_id,
            "step": "risk_assessment_complete",
            "risk_level": risk_level,
            "risk_score": risk_score,
            "factors": factors,
            "duration_ms": duration_ms,
        },
    )


def log_diversification(
    request_id: str,
    investment_count: int,
    score: int,
    recommendation_count: int,
    duration_ms: float,
) -> None:
    """Log diversification scoring outcome"""
    logging.info(
        "Diversification scored",
        extra={
            "request_id": request_id,
            "step": "diversification_complete",
            "investment_count": investment_count,
            "score": score,
            "recommendation_count": recommendation_count,
            "duration_ms": duration_ms,
        },
    )
