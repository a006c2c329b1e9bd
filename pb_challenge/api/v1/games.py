"""/v1/games - Four-round game sessions"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from pb_challenge.api.v1.schemas import (
    CreateGameRequest,
    GameResponse,
    PlayRoundRequest,
    RoundOutcomeResponse,
    SummaryResponse,
)
from pb_challenge.api.dependencies import get_game_repository, get_request_id, to_allocation
from pb_challenge.config import settings
from pb_challenge.domain.catalog import CHARACTER_LABELS, TOTAL_ROUNDS
from pb_challenge.domain.exceptions import GameFlowError, GameNotFoundError, InvariantViolation
from pb_challenge.domain.game import GameState, emotion_for
from pb_challenge.infrastructure.sessions import GameRepository
from pb_challenge.infrastructure.observability.metrics import (
    games_started_counter,
    record_game_completed,
    record_round,
)
from pb_challenge.infrastructure.observability.logging import log_round_evaluated
from pb_challenge.utils.format_utils import format_won, format_won_diff

router = APIRouter()


def to_game_response(game: GameState) -> GameResponse:
    return GameResponse(
        game_id=game.game_id,
        character=game.character,
        character_label=CHARACTER_LABELS[game.character],
        current_round=game.current_round,
        total_rounds=TOTAL_ROUNDS,
        is_over=game.is_over,
        total_score=game.total_score,
        current_total_assets=game.current_total_assets,
        current_total_assets_label=format_won(game.current_total_assets),
        history=[
            RoundOutcomeResponse.from_outcome(h, emotion_for(h.satisfaction_score))
            for h in game.history
        ],
    )


def load_game(repo: GameRepository, game_id: str) -> GameState:
    try:
        return repo.get_game(game_id)
    except GameNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/games", response_model=GameResponse, status_code=201)
def create_game(
    request_body: CreateGameRequest,
    repo: GameRepository = Depends(get_game_repository),
):
    """Start a new game at round 1 with the chosen client persona"""
    try:
        game = repo.create_game(request_body.character, settings.initial_assets)
    except GameFlowError as e:
        logging.warning(f"Game not created: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    games_started_counter.labels(character=game.character.value).inc()
    logging.info("Game started", extra={"game_id": game.game_id, "character": game.character.value})
    return to_game_response(game)


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(game_id: str, repo: GameRepository = Depends(get_game_repository)):
    return to_game_response(load_game(repo, game_id))


@router.post("/games/{game_id}/rounds", response_model=RoundOutcomeResponse)
def play_round(
    game_id: str,
    request_body: PlayRoundRequest,
    request: Request,
    repo: GameRepository = Depends(get_game_repository),
):
    """
    Submit the allocation for the game's current round.

    Flow:
    1. Validate the allocation
    2. Evaluate against the current scenario and running asset total
    3. Fold the outcome into the game and advance to the next round
    """
    start_time = time.time()
    request_id = get_request_id(request)
    game = load_game(repo, game_id)

    try:
        allocation = to_allocation(request_body.allocation)
        outcome = game.play_round(allocation)

    except InvariantViolation as e:
        logging.warning(f"Invalid allocation: {e}", extra={"request_id": request_id, "game_id": game_id})
        raise HTTPException(status_code=422, detail=str(e))

    except GameFlowError as e:
        logging.warning(f"Round rejected: {e}", extra={"request_id": request_id, "game_id": game_id})
        raise HTTPException(status_code=409, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id, "game_id": game_id})
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
        game_id=game_id,
    )
    if game.is_over:
        record_game_completed(game.current_total_assets - game.initial_assets)

    return RoundOutcomeResponse.from_outcome(outcome, emotion)


@router.get("/games/{game_id}/summary", response_model=SummaryResponse)
def get_summary(game_id: str, repo: GameRepository = Depends(get_game_repository)):
    """
    Final report after the last round.

    Returns 409 while rounds remain.
    """
    game = load_game(repo, game_id)
    try:
        summary = game.summary()
    except GameFlowError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return SummaryResponse(
        game_id=game.game_id,
        average_score=summary.average_score,
        initial_assets=summary.initial_assets,
        final_assets=summary.final_assets,
        final_assets_label=format_won(summary.final_assets),
        profit=summary.profit,
        profit_label=format_won_diff(summary.profit),
        profit_rate_percent=summary.profit_rate_percent,
        final_comment=summary.final_comment,
        emotion=summary.emotion,
        history=[
            RoundOutcomeResponse.from_outcome(h, emotion_for(h.satisfaction_score))
            for h in summary.history
        ],
    )
