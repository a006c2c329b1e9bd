"""Domain models - pure Python dataclasses representing game entities"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from pb_challenge.domain.exceptions import InvalidAllocationError


class AssetId(str, Enum):
    """The six tradable stocks. Closed set, no dynamic instruments."""

    SAMSUNG = "Samsung"
    NAVER = "Naver"
    CELLTRION = "Celltrion"
    HANWHA = "Hanwha"
    TESLA = "Tesla"
    NVIDIA = "Nvidia"


class Character(str, Enum):
    """Client persona the player advises"""

    RICH = "rich"
    IDOL = "idol"
    CHAIRMAN = "chairman"
    SPORT = "sport"


class Emotion(str, Enum):
    """Client reaction shown next to a comment"""

    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANGRY = "angry"


@dataclass(frozen=True)
class StockInfo:
    """Display metadata for a tradable stock"""

    id: AssetId
    name: str
    sector: str


@dataclass(frozen=True)
class ScenarioDefinition:
    """Market condition for one round"""

    id: int
    title: str
    description: str
    sub_description: List[str]
    cash_return: float
    asset_returns: Dict[AssetId, float]
    key_focus: str


@dataclass(frozen=True)
class AllocationInput:
    """
    Player's decision for one round.

    cash_ratio is derived from stock_ratio; build instances through create()
    so the two always sum to 100.
    """

    stock_ratio: float
    cash_ratio: float
    asset_weights: Dict[AssetId, float]

    @classmethod
    def create(
        cls,
        stock_ratio: float,
        asset_weights: Mapping[AssetId, float],
        cash_ratio: Optional[float] = None,
    ) -> "AllocationInput":
        """
        Validated factory.

        Raises:
            InvalidAllocationError: ratio out of [0, 100], cash_ratio that does
                not complement stock_ratio, missing, negative or non-finite weights
        """
        if not 0 <= stock_ratio <= 100:
            raise InvalidAllocationError(f"stock_ratio must be within [0, 100], got {stock_ratio}")

        derived_cash = 100 - stock_ratio
        if cash_ratio is not None and not math.isclose(cash_ratio, derived_cash, abs_tol=1e-9):
            raise InvalidAllocationError(
                f"stock_ratio + cash_ratio must equal 100, got {stock_ratio} + {cash_ratio}"
            )

        try:
            weights = {AssetId(key): value for key, value in asset_weights.items()}
        except ValueError as e:
            raise InvalidAllocationError(f"Unknown asset in asset_weights: {e}") from e
        missing = [asset.value for asset in AssetId if asset not in weights]
        if missing:
            raise InvalidAllocationError(f"asset_weights missing entries for: {', '.join(missing)}")

        invalid = [
            asset.value for asset, value in weights.items() if not math.isfinite(value) or value < 0
        ]
        if invalid:
            raise InvalidAllocationError(f"asset_weights must be finite and non-negative: {', '.join(invalid)}")

        return cls(stock_ratio=stock_ratio, cash_ratio=derived_cash, asset_weights=weights)


@dataclass(frozen=True)
class RoundOutcome:
    """Result of evaluating one round"""

    round_id: int
    profit_rate_percent: float
    assets_before: int
    profit_amount: float
    assets_after: int
    satisfaction_score: int
    profit_tier: str
    comment: str


@dataclass(frozen=True)
class GameSummary:
    """Final report after the last round"""

    average_score: int
    initial_assets: int
    final_assets: int
    profit: int
    profit_rate_percent: float
    final_comment: str
    emotion: Emotion
    history: List[RoundOutcome] = field(default_factory=list)
