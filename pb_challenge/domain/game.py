"""Game session state owned by the caller, plus the end-of-game report"""

import math
import uuid
from dataclasses import dataclass, field
from typing import List

from pb_challenge.domain.catalog import TOTAL_ROUNDS, get_scenario
from pb_challenge.domain.exceptions import GameFlowError
from pb_challenge.domain.models import (
    AllocationInput,
    Character,
    Emotion,
    GameSummary,
    RoundOutcome,
    ScenarioDefinition,
)
from pb_challenge.domain.scoring import evaluate, round_half_away

INTRO_ROUND = 0

FINAL_COMMENT_GREAT = "자네 정말 수고했네! 이번에 보여준 근거 있는 판단만큼, 다음에도 이런 근거 있는 선택을 기대하겠네."
FINAL_COMMENT_GOOD = "수익은 어느 정도 거두었군. 시장 흐름에 잘 대응했지만, 좀 더 공격적인 운용 전략이 있었다면 하는 아쉬움이 있네."
FINAL_COMMENT_POOR = "PB님, 제 자산이 장난입니까? 실험은 삼가시죠. 좀 더 신중하게 하게."
FINAL_COMMENT_BAD = "실망이 크네... 자네는 PB의 기본인 '리스크 관리'부터 다시 공부하고 오게나."


def emotion_for(score: float) -> Emotion:
    """Client mood for a round score or a final average"""
    if score >= 80:
        return Emotion.HAPPY
    elif score >= 60:
        return Emotion.NEUTRAL
    elif score >= 40:
        return Emotion.SAD
    else:
        return Emotion.ANGRY


def final_comment_for(average_score: int) -> str:
    if average_score >= 80:
        return FINAL_COMMENT_GREAT
    elif average_score >= 60:
        return FINAL_COMMENT_GOOD
    elif average_score >= 40:
        return FINAL_COMMENT_POOR
    else:
        return FINAL_COMMENT_BAD


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, matching the report's averaging"""
    return math.floor(value + 0.5)


@dataclass
class GameState:
    """
    Running state of one play-through.

    current_round: 0 = intro, 1..TOTAL_ROUNDS = playing, TOTAL_ROUNDS + 1 = ending.
    history is append-only; outcomes are never edited or removed.
    """

    character: Character
    initial_assets: int
    current_total_assets: int
    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    current_round: int = INTRO_ROUND
    total_score: int = 0
    history: List[RoundOutcome] = field(default_factory=list)

    @classmethod
    def new(cls, character: Character, initial_assets: int) -> "GameState":
        return cls(
            character=character,
            initial_assets=initial_assets,
            current_total_assets=initial_assets,
        )

    @property
    def is_started(self) -> bool:
        return self.current_round > INTRO_ROUND

    @property
    def is_over(self) -> bool:
        return self.current_round > TOTAL_ROUNDS

    def start(self) -> None:
        """Leave the intro screen and begin round 1"""
        if self.is_started:
            raise GameFlowError(f"Game {self.game_id} already started")
        self.current_round = 1

    def current_scenario(self) -> ScenarioDefinition:
        if not self.is_started:
            raise GameFlowError(f"Game {self.game_id} has not started")
        if self.is_over:
            raise GameFlowError(f"Game {self.game_id} is over")
        return get_scenario(self.current_round)

    def record(self, outcome: RoundOutcome) -> None:
        """
        Fold an evaluated round into the running totals and advance.

        Raises:
            GameFlowError: outcome is for a round other than the current one
        """
        if outcome.round_id != self.current_round:
            raise GameFlowError(
                f"Outcome for round {outcome.round_id} does not match current round {self.current_round}"
            )
        self.history.append(outcome)
        self.total_score += outcome.satisfaction_score
        self.current_total_assets = outcome.assets_after
        self.current_round += 1

    def play_round(self, allocation: AllocationInput) -> RoundOutcome:
        """Evaluate the current round against the running asset total and record it"""
        scenario = self.current_scenario()
        outcome = evaluate(allocation, scenario, self.current_total_assets)
        self.record(outcome)
        return outcome

    def summary(self) -> GameSummary:
        """
        Final report.

        Raises:
            GameFlowError: rounds remain to be played
        """
        if not self.is_over:
            raise GameFlowError(
                f"Game {self.game_id} is still on round {self.current_round} of {TOTAL_ROUNDS}"
            )

        average_score = round_half_up(self.total_score / TOTAL_ROUNDS)
        profit = self.current_total_assets - self.initial_assets
        profit_rate = profit / self.initial_assets * 100 if self.initial_assets > 0 else 0.0

        return GameSummary(
            average_score=average_score,
            initial_assets=self.initial_assets,
            final_assets=self.current_total_assets,
            profit=profit,
            profit_rate_percent=round_half_away(profit_rate, 1),
            final_comment=final_comment_for(average_score),
            emotion=emotion_for(average_score),
            history=list(self.history),
        )
