"""Lookahead service - what the application calls on every input change"""

import logging
import time
import uuid
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import ValidationError

from clearahead.config import settings
from clearahead.domain.exceptions import InvalidSnapshotError
from clearahead.domain.insights import summarize_timeline
from clearahead.domain.timeline import project
from clearahead.domain.validation import collect_input_problems
from clearahead.domain.what_if import build_what_if_event
from clearahead.infrastructure.observability.logging import log_projection, setup_logging
from clearahead.infrastructure.observability.metrics import record_projection, what_if_counter
from clearahead.schemas import InsightsSchema, LookaheadRequest, LookaheadResponse, ProjectionSchema

# Setup structured logging
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


def effective_window_weeks(requested: Optional[int]) -> int:
    """Clamp the requested lookahead into the configured policy range"""
    if not requested:
        requested = settings.default_window_weeks
    return min(settings.max_window_weeks, max(settings.min_window_weeks, requested))


def safe_number(lowest: Decimal, buffer: Optional[Decimal] = None) -> Decimal:
    """Lowest projected balance minus the safety buffer, never below zero"""
    if buffer is None:
        buffer = settings.safety_buffer
    return max(Decimal(0), lowest - buffer)


def load_request(payload: Dict[str, Any]) -> LookaheadRequest:
    """Validate a stored snapshot payload"""
    try:
        return LookaheadRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Invalid snapshot: {e.error_count()} errors")
        raise InvalidSnapshotError("Snapshot payload is malformed") from e


def run_lookahead(request: LookaheadRequest) -> LookaheadResponse:
    """
    Compute the lookahead the application displays.

    Flow:
    1. Clamp the window and convert the snapshot to engine inputs
    2. Project the baseline and rate confidence
    3. Derive safe number, insights and readiness problems
    4. Project again with the what-if purchase when one is usable
    5. Record metrics and log the outcome
    """
    start_time = time.time()
    projection_id = str(uuid.uuid4())

    window_weeks = effective_window_weeks(request.window_weeks)
    inputs = request.to_inputs()

    result = project(inputs, window_weeks)
    insights = summarize_timeline(result)
    problems = collect_input_problems(inputs)

    what_if_projection = None
    what_if_safe = None
    if request.what_if is not None:
        event = build_what_if_event(request.what_if.name, request.what_if.amount, request.what_if.date)
        if event is not None:
            what_if_result = project(inputs, window_weeks, [event])
            what_if_projection = ProjectionSchema.from_result(what_if_result)
            what_if_safe = safe_number(what_if_result.lowest)
            what_if_counter.inc()

    duration = time.time() - start_time
    below_zero = result.lowest < 0
    record_projection(result.confidence.value, below_zero, window_weeks, duration)
    log_projection(
        projection_id,
        window_weeks,
        len(result.events),
        result.confidence.value,
        below_zero,
        duration * 1000,
    )

    return LookaheadResponse(
        projection_id=projection_id,
        window_weeks=window_weeks,
        projection=ProjectionSchema.from_result(result),
        safe_number=safe_number(result.lowest),
        insights=InsightsSchema.from_insights(insights),
        problems=problems,
        what_if=what_if_projection,
        what_if_safe_number=what_if_safe,
    )
