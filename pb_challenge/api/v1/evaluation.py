"""POST /v1/evaluate - Stateless round evaluation"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from pb_challenge.api.v1.schemas import EvaluateRequest, RoundOutcomeResponse
from pb_challenge.api.dependencies import get_request_id, to_allocation
from pb_challenge.domain.catalog import get_scenario
from pb_challenge.domain.exceptions import InvariantViolation, ScenarioNotFoundError
from pb_challenge.domain.game import emotion_for
from pb_challenge.domain.scoring import evaluate
from pb_challenge.infrastructure.observability.metrics import record_round
from pb_challenge.infrastructure.observability.logging import log_round_evaluated

router = APIRouter()


@router.post("/evaluate", response_model=RoundOutcomeResponse)
def evaluate_round(request_body: EvaluateRequest, request: Request):
    """
    Evaluate one allocation against one scenario without touching any game.

    The caller supplies the running asset total and keeps its own state.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        scenario = get_scenario(request_body.scenario_id)
        allocation = to_allocation(request_body.allocation)
        outcome = evaluate(allocation, scenario, request_body.assets_before)

    except ScenarioNotFoundError as e:
        logging.warning(f"Unknown scenario: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except InvariantViolation as e:
        logging.warning(f"Invalid evaluation input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    emotion = emotion_for(outcome.satisfaction_score)
    duration_ms = (time.time() - start_time) * 1000
    record_round(outcome.round_id, outcome.profit_tier, outcome.satisfaction_score)
    log_round_evaluated(
        request_id,
        outcome.round_id,
        outcome.profit_rate_percent,
        outcome.satisfaction_score,
        outcome.assets_after,
        duration_ms,
    )

    return RoundOutcomeResponse.from_outcome(outcome, emotion)
