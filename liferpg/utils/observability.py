"""
Structured Logging & Observability
Logging that's both human-readable and machine-parseable.
"""
import sys
from loguru import logger
from typing import Any, Dict
from liferpg.config import get_settings


def configure_logging():
    """
    Configure loguru for the service.

    In development: Human-readable colorized output
    In production: Structured JSON logs for ingestion
    """
    settings = get_settings()

    # Remove default handler
    logger.remove()

    if not settings.enable_structured_logging:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            level=settings.log_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,  # Output as JSON
        )

    logger.info(f"Logging configured: level={settings.log_level}, structured={settings.enable_structured_logging}")


def log_classification(
    urgency: str,
    priority: str,
    suggested_action: str,
    confidence_score: float,
    requires_human_review: bool,
    duration_ms: float | None = None,
    **context
):
    """
    Structured logging for a single brain dump classification.

    Only the derived labels are logged, never the raw text, since brain
    dumps routinely contain personal details.

    Args:
        urgency: Detected urgency label
        priority: Derived priority label
        suggested_action: Suggested follow-up action
        confidence_score: Heuristic confidence in [0, 1]
        requires_human_review: Whether the dump was flagged for review
        duration_ms: Classification time in milliseconds
        **context: Additional context (brain_dump_id, task_count, etc.)

    Example:
        >>> log_classification(
        ...     urgency="today",
        ...     priority="high",
        ...     suggested_action="create_task",
        ...     confidence_score=0.8,
        ...     requires_human_review=False,
        ...     task_count=1
        ... )
    """
    log_data = {
        "event_type": "classification",
        "urgency": urgency,
        "priority": priority,
        "suggested_action": suggested_action,
        "confidence_score": round(confidence_score, 3),
        "requires_human_review": requires_human_review,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    log_data.update(context)

    logger.bind(**log_data).info(
        f"Classified brain dump | {suggested_action} | priority={priority}"
    )


def log_business_event(
    event_type: str,
    brain_dump_id: str,
    **details: Dict[str, Any]
):
    """
    Log business-critical events for analytics.

    Examples:
        - Brain dump submitted
        - Brain dump processed / flagged for review
        - Quest draft generated

    Args:
        event_type: Type of event (e.g., "brain_dump_processed")
        brain_dump_id: The brain dump involved
        **details: Event-specific data
    """
    log_data = {
        "event_type": event_type,
        "brain_dump_id": brain_dump_id,
        **details
    }

    logger.bind(**log_data).success(f"Business Event: {event_type}")
