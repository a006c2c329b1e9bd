"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from pb_challenge.config import settings


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


def log_round_evaluated(
    request_id: str,
    round_id: int,
    profit_rate_percent: float,
    satisfaction_score: int,
    assets_after: int,
    duration_ms: float,
    game_id: Optional[str] = None,
) -> None:
    """Log structured round outcome for analysis"""
    logging.info(
        "Round evaluated",
        extra={
            "request_id": request_id,
            "game_id": game_id,
            "step": "round_evaluated",
            "round_id": round_id,
            "profit_rate_percent": profit_rate_percent,
            "satisfaction_score": satisfaction_score,
            "assets_after": assets_after,
            "duration_ms": duration_ms,
        },
    )
