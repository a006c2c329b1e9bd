"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from pb_challenge.domain.models import AssetId, Character, Emotion, RoundOutcome
from pb_challenge.domain.scoring import MAX_ASSETS
from pb_challenge.utils.format_utils import format_won, format_won_diff


class StockSchema(BaseModel):
    """Tradable stock metadata"""

    id: AssetId
    name: str
    sector: str


class ScenarioSchema(BaseModel):
    """Round scenario as shown on the scenario screen"""

    id: int
    title: str
    description: str
    sub_description: List[str]
    key_focus: str
    cash_return: float
    asset_returns: Dict[AssetId, float]


class AllocationSchema(BaseModel):
    """Player's allocation for one round"""

    model_config = ConfigDict(allow_inf_nan=False)

    stock_ratio: float = Field(..., ge=0, le=100, description="Percent of assets held in stocks")
    cash_ratio: Optional[float] = Field(None, ge=0, le=100, description="Defaults to 100 - stock_ratio")
    asset_weights: Dict[AssetId, float] = Field(..., description="Raw slider weight per stock")


class EvaluateRequest(BaseModel):
    """Request body for POST /v1/evaluate"""

    scenario_id: int = Field(..., ge=1, description="Round scenario to evaluate against")
    assets_before: int = Field(..., ge=0, le=MAX_ASSETS, description="Asset total before the round, in KRW")
    allocation: AllocationSchema


class RoundOutcomeResponse(BaseModel):
    """Evaluated round"""

    round_id: int
    profit_rate_percent: float
    assets_before: int
    assets_after: int
    assets_after_label: str
    profit_label: str
    satisfaction_score: int
    profit_tier: str
    emotion: Emotion
    comment: str

    @classmethod
    def from_outcome(cls, outcome: RoundOutcome, emotion: Emotion) -> "RoundOutcomeResponse":
        return cls(
            round_id=outcome.round_id,
            profit_rate_percent=outcome.profit_rate_percent,
            assets_before=outcome.assets_before,
            assets_after=outcome.assets_after,
            assets_after_label=format_won(outcome.assets_after),
            profit_label=format_won_diff(outcome.assets_after - outcome.assets_before),
            satisfaction_score=outcome.satisfaction_score,
            profit_tier=outcome.profit_tier,
            emotion=emotion,
            comment=outcome.comment,
        )


class CreateGameRequest(BaseModel):
    """Request body for POST /v1/games"""

    character: Character = Character.RICH


class PlayRoundRequest(BaseModel):
    """Request body for POST /v1/games/{game_id}/rounds"""

    allocation: AllocationSchema


class GameResponse(BaseModel):
    """Current state of a game"""

    game_id: str
    character: Character
    character_label: str
    current_round: int
    total_rounds: int
    is_over: bool
    total_score: int
    current_total_assets: int
    current_total_assets_label: str
    history: List[RoundOutcomeResponse]


class SummaryResponse(BaseModel):
    """Response for GET /v1/games/{game_id}/summary"""

    game_id: str
    average_score: int
    initial_assets: int
    final_assets: int
    final_assets_label: str
    profit: int
    profit_label: str
    profit_rate_percent: float
    final_comment: str
    emotion: Emotion
    history: List[RoundOutcomeResponse]
