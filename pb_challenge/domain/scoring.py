"""Round evaluation engine - core business logic for scoring a player's allocation"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Mapping, Optional

from pb_challenge.domain.exceptions import (
    InvalidAllocationError,
    InvalidAssetsError,
    InvalidScenarioError,
)
from pb_challenge.domain.models import AllocationInput, AssetId, RoundOutcome, ScenarioDefinition


COMMENT_EXCELLENT = "수익률이 아주 예술이야. 자네가 사고 싶다던 그 차, 오늘 계약하러 가게."
COMMENT_MODEST = "소소하구먼. 오늘 점심은 가볍게 스테이크 정도로 하지."
COMMENT_MINOR_LOSS = "오늘 내 커피 한 잔 값이 사라졌군. 자네, 내일은 스테이크 값을 벌어와야 할 거야."
COMMENT_HEAVY_LOSS = "자네, 사막의 밤이 왜 무서운지 아나? 지금 내 기분이 딱 그렇군."

COMMENT_RATE_HIKE_FEAR = COMMENT_HEAVY_LOSS
COMMENT_AI_RALLY_PRAISE = "AI 대장주를 낚아채는 솜씨가 아주 예술이야. 자네가 사고 싶다던 그 차, 오늘 계약하러 가게."
COMMENT_AI_RALLY_SCOLD = "시장이 이렇게 불타는데 겨우 커피값이나 벌어오다니... 자네, 사막의 밤이 왜 무서운지 아나?"
COMMENT_WAR_PRAISE = "방산주로 리스크를 예술적으로 방어했군! 오늘 당장 차 계약하러 가게나."
COMMENT_WAR_FEAR = "사막의 한가운데서 나침반을 잃어버린 기분이야. 내 자산이 장난인가?"
COMMENT_PANDEMIC_PRAISE = "포트폴리오 구성이 아주 예술이야! 오늘 당장 그 차 계약하러 가게."
COMMENT_PANDEMIC_SCOLD = "반등 기회에 커피값이나 벌고 있다니... 지금 내 기분은 사막의 밤보다 더 차갑군."

MIN_SATISFACTION = 0
MAX_SATISFACTION = 100

# Float slider values: 100 - 33.3 + 33.3 may miss 100 by an ulp
RATIO_TOLERANCE = 1e-9

# 1000조 won; keeps float settlement arithmetic in range
MAX_ASSETS = 10**15


def normalize(weights: Mapping[AssetId, float]) -> Dict[AssetId, float]:
    """
    Convert raw slider weights into percentages summing to 100.

    All-zero weights divide by 1 instead of 0, so every output is 0 rather
    than an equal split. Existing game behavior, kept as-is.
    """
    total = sum(weights.values())
    safe_total = 1 if total == 0 else total
    return {asset: weight / safe_total * 100 for asset, weight in weights.items()}


def blend_return(allocation: AllocationInput, scenario: ScenarioDefinition) -> float:
    """
    Total fractional return of the portfolio for one scenario.

    Stock portion earns the weight-averaged stock return, cash portion earns
    the scenario's cash rate. Assumes stock_ratio + cash_ratio == 100.
    """
    stock_fraction = allocation.stock_ratio / 100
    cash_fraction = allocation.cash_ratio / 100

    normalized = normalize(allocation.asset_weights)
    weighted_stock_return = sum(
        (normalized[asset] / 100) * scenario.asset_returns[asset] for asset in AssetId
    )

    return stock_fraction * weighted_stock_return + cash_fraction * scenario.cash_return


def settle(assets_before: int, total_return: float) -> tuple[float, int]:
    """
    Apply a return to the asset total.

    The combined value is floored, not rounded: a small net loss can cost one
    extra won.

    Returns: (profit_amount, assets_after)
    """
    profit_amount = assets_before * total_return
    assets_after = math.floor(assets_before + profit_amount)
    return profit_amount, assets_after


def round_half_away(value: float, digits: int) -> float:
    """
    Round an exact binary tie away from zero, as the result screen displays it.

    round() would send 0.125 to 0.12; this gives 0.13 (and -0.13 for -0.125).
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def determine_profit_tier(profit_percent: float) -> tuple[str, int, str]:
    """
    Map profit percent to the baseline satisfaction band.

    Bands (first match wins, boundaries belong to the higher band):
    - >= 5%:  95, delighted
    - >= 0%:  75, content
    - >= -5%: 50, annoyed
    - else:   20, furious

    Returns: (tier, satisfaction, comment)
    """
    if profit_percent >= 5:
        return "excellent", 95, COMMENT_EXCELLENT
    elif profit_percent >= 0:
        return "modest", 75, COMMENT_MODEST
    elif profit_percent >= -5:
        return "minor_loss", 50, COMMENT_MINOR_LOSS
    else:
        return "heavy_loss", 20, COMMENT_HEAVY_LOSS


@dataclass(frozen=True)
class Adjustment:
    """Scenario-specific change to the baseline satisfaction"""

    comment: str
    delta: int = 0
    cap: Optional[int] = None

    def apply(self, satisfaction: int) -> int:
        if self.cap is not None:
            return min(satisfaction, self.cap)
        return max(min(satisfaction + self.delta, MAX_SATISFACTION), MIN_SATISFACTION)


ScenarioRule = Callable[[float, Mapping[AssetId, float], float], Optional[Adjustment]]


def rate_hike_rule(
    profit_percent: float, normalized: Mapping[AssetId, float], stock_ratio: float
) -> Optional[Adjustment]:
    # Going nearly all-in on stocks while rates climb scares the client
    if stock_ratio > 90:
        return Adjustment(comment=COMMENT_RATE_HIKE_FEAR, cap=30)
    return None


def ai_rally_rule(
    profit_percent: float, normalized: Mapping[AssetId, float], stock_ratio: float
) -> Optional[Adjustment]:
    if normalized[AssetId.NVIDIA] > 20 and profit_percent > 0:
        return Adjustment(comment=COMMENT_AI_RALLY_PRAISE, delta=5)
    elif stock_ratio < 50:
        return Adjustment(comment=COMMENT_AI_RALLY_SCOLD, delta=-10)
    return None


def geopolitical_rule(
    profit_percent: float, normalized: Mapping[AssetId, float], stock_ratio: float
) -> Optional[Adjustment]:
    if normalized[AssetId.HANWHA] > 20 and profit_percent > 0:
        return Adjustment(comment=COMMENT_WAR_PRAISE, delta=5)
    elif stock_ratio > 80:
        return Adjustment(comment=COMMENT_WAR_FEAR, cap=20)
    return None


def pandemic_rule(
    profit_percent: float, normalized: Mapping[AssetId, float], stock_ratio: float
) -> Optional[Adjustment]:
    beneficiary_held = normalized[AssetId.CELLTRION] > 15 or normalized[AssetId.NAVER] > 15
    if beneficiary_held and profit_percent > 0:
        return Adjustment(comment=COMMENT_PANDEMIC_PRAISE, delta=5)
    elif stock_ratio < 30:
        return Adjustment(comment=COMMENT_PANDEMIC_SCOLD, delta=-10)
    return None


SCENARIO_RULES: Dict[int, ScenarioRule] = {
    1: rate_hike_rule,
    2: ai_rally_rule,
    3: geopolitical_rule,
    4: pandemic_rule,
}


def score_satisfaction(
    profit_percent: float,
    allocation: AllocationInput,
    normalized: Mapping[AssetId, float],
    scenario_id: int,
) -> tuple[int, str]:
    """
    Two-stage client satisfaction.

    Stage 1 picks the profit band baseline and comment. Stage 2 looks up the
    scenario rule, which may raise, lower or cap the baseline and overwrite
    the comment. The result is clamped to [0, 100] last, unconditionally.

    Returns: (satisfaction, comment)
    """
    _, satisfaction, comment = determine_profit_tier(profit_percent)

    rule = SCENARIO_RULES.get(scenario_id)
    if rule is not None:
        adjustment = rule(profit_percent, normalized, allocation.stock_ratio)
        if adjustment is not None:
            satisfaction = adjustment.apply(satisfaction)
            comment = adjustment.comment

    satisfaction = max(MIN_SATISFACTION, min(satisfaction, MAX_SATISFACTION))
    return satisfaction, comment


def validate_inputs(
    allocation: AllocationInput,
    scenario: ScenarioDefinition,
    assets_before: int,
) -> None:
    """
    Fail fast on caller bugs; nothing here is coerced.

    Raises:
        InvalidAllocationError: ratios not summing to 100, missing, negative or non-finite weights
        InvalidScenarioError: scenario lacks a return for some asset
        InvalidAssetsError: assets_before negative, above MAX_ASSETS or not an integer
    """
    if not math.isclose(allocation.stock_ratio + allocation.cash_ratio, 100, abs_tol=RATIO_TOLERANCE):
        raise InvalidAllocationError(
            f"stock_ratio + cash_ratio must equal 100, got "
            f"{allocation.stock_ratio} + {allocation.cash_ratio}"
        )

    missing_weights = [a.value for a in AssetId if a not in allocation.asset_weights]
    if missing_weights:
        raise InvalidAllocationError(f"asset_weights missing entries for: {', '.join(missing_weights)}")

    invalid = [
        a.value for a in AssetId
        if not math.isfinite(allocation.asset_weights[a]) or allocation.asset_weights[a] < 0
    ]
    if invalid:
        raise InvalidAllocationError(f"asset_weights must be finite and non-negative: {', '.join(invalid)}")

    missing_returns = [a.value for a in AssetId if a not in scenario.asset_returns]
    if missing_returns:
        raise InvalidScenarioError(
            f"Scenario {scenario.id} missing asset_returns for: {', '.join(missing_returns)}"
        )

    if isinstance(assets_before, bool) or not isinstance(assets_before, int):
        raise InvalidAssetsError(f"assets_before must be an integer, got {assets_before!r}")
    if assets_before < 0:
        raise InvalidAssetsError(f"assets_before must be non-negative, got {assets_before}")
    if assets_before > MAX_ASSETS:
        raise InvalidAssetsError(f"assets_before must not exceed {MAX_ASSETS}, got {assets_before}")


def evaluate(
    allocation: AllocationInput,
    scenario: ScenarioDefinition,
    assets_before: int,
) -> RoundOutcome:
    """
    Main entry point: evaluate one round.

    Pure and stateless: the caller folds the returned outcome into its own
    game state.
    """
    validate_inputs(allocation, scenario, assets_before)

    normalized = normalize(allocation.asset_weights)
    total_return = blend_return(allocation, scenario)
    profit_percent = total_return * 100

    profit_amount, assets_after = settle(assets_before, total_return)
    tier, _, _ = determine_profit_tier(profit_percent)
    satisfaction, comment = score_satisfaction(profit_percent, allocation, normalized, scenario.id)

    return RoundOutcome(
        round_id=scenario.id,
        profit_rate_percent=round_half_away(profit_percent, 2),
        assets_before=assets_before,
        profit_amount=profit_amount,
        assets_after=assets_after,
        satisfaction_score=satisfaction,
        profit_tier=tier,
        comment=comment,
    )
