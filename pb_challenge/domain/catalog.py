"""Static game data: stocks, the four round scenarios, personas and defaults"""

from typing import Dict, List

from pb_challenge.domain.exceptions import ScenarioNotFoundError
from pb_challenge.domain.models import (
    AllocationInput,
    AssetId,
    Character,
    ScenarioDefinition,
    StockInfo,
)


STOCK_LIST: List[StockInfo] = [
    StockInfo(id=AssetId.SAMSUNG, name="삼성전자", sector="반도체"),
    StockInfo(id=AssetId.NAVER, name="네이버", sector="IT/플랫폼"),
    StockInfo(id=AssetId.CELLTRION, name="셀트리온", sector="바이오"),
    StockInfo(id=AssetId.HANWHA, name="한화에어로스페이스", sector="방산/항공우주"),
    StockInfo(id=AssetId.TESLA, name="테슬라", sector="전기차"),
    StockInfo(id=AssetId.NVIDIA, name="엔비디아", sector="AI 반도체"),
]

CHARACTER_LABELS: Dict[Character, str] = {
    Character.RICH: "자산가",
    Character.IDOL: "아이돌",
    Character.CHAIRMAN: "기업가",
    Character.SPORT: "스포츠 스타",
}

SCENARIOS: List[ScenarioDefinition] = [
    ScenarioDefinition(
        id=1,
        title="ROUND 1. 글로벌 금리 인상기",
        description=(
            "속보가 이어진다.\n“기준금리 추가 인상.”\n\n"
            "물가는 쉽게 잡히지 않고,\n중앙은행은 강한 긴축을 예고한다.\n\n"
            "증시는 방향을 잡지 못한 채 흔들린다.\n낙관과 불안이 하루 만에 뒤바뀐다.\n\n"
            "지금이 조정의 구간인지, 하락의 시작인지, 판단은 PB의 몫이다."
        ),
        sub_description=[
            "증시는 방향을 잡지 못한 채 흔들린다.",
            "낙관과 불안이 하루 만에 뒤바뀐다.",
            "지금이 조정의 구간인지, 하락의 시작인지, 판단은 PB의 몫입니다.",
        ],
        cash_return=0.04,  # high rates favor cash
        asset_returns={
            AssetId.SAMSUNG: -0.05,
            AssetId.NAVER: -0.15,
            AssetId.CELLTRION: -0.05,
            AssetId.HANWHA: -0.02,
            AssetId.TESLA: -0.20,
            AssetId.NVIDIA: -0.15,
        },
        key_focus=(
            "변동성이 큰 시기에는 현금을 든든한 방패로 챙겨두는 게 어떨까요? "
            "40~60% 정도의 방어적인 배분이 유리할 수도 있어요."
        ),
    ),
    ScenarioDefinition(
        id=2,
        title="ROUND 2. AI 수요 폭발 & 기술주 랠리",
        description=(
            "대형 IT 기업이 예상 밖의 실적을 발표한다.\nAI 산업에 자금이 몰린다.\n\n"
            "주가는 연일 신고가를 경신하고,\n시장에는 낙관이 가득하다.\n\n"
            "“이번에는 다르다”는 말이 반복된다.\n\n"
            "지금이 거대한 기회의 시작인지, 과열의 정점인지, 판단은 PB의 몫이다."
        ),
        sub_description=[
            "주가는 연일 신고가를 경신하고, 시장에는 낙관이 가득하다.",
            "“이번에는 다르다”는 말이 반복된다.",
            "지금이 거대한 기회의 시작인지, 과열의 정점인지, 판단은 PB의 몫입니다.",
        ],
        cash_return=0.02,
        asset_returns={
            AssetId.SAMSUNG: 0.08,
            AssetId.NAVER: 0.05,
            AssetId.CELLTRION: 0.01,
            AssetId.HANWHA: 0.03,
            AssetId.TESLA: 0.12,
            AssetId.NVIDIA: 0.30,
        },
        key_focus=(
            "시장의 뜨거운 열기에 올라타 보는 건 어떨까요? "
            "70~90% 정도 과감하게 주식을 담아봐도 좋을 시기예요."
        ),
    ),
    ScenarioDefinition(
        id=3,
        title="ROUND 3. 지정학적 리스크 (전쟁 발발)",
        description=(
            "새벽 긴급 뉴스가 전해진다.\n특정 지역에서 무력 충돌이 발생했다.\n\n"
            "원자재 가격과 환율이 급등하고,\n증시는 개장과 동시에 급락한다.\n\n"
            "공포는 빠르게 확산된다.\n\n"
            "지금이 일시적 충격인지, 구조적 위기의 신호인지, 판단은 PB의 몫이다."
        ),
        sub_description=[
            "원자재 가격과 환율이 급등하고, 증시는 개장과 동시에 급락한다.",
            "공포는 빠르게 확산된다.",
            "방산 섹터에 대한 시장의 관심이 급증합니다.",
        ],
        cash_return=0.01,
        asset_returns={
            AssetId.SAMSUNG: -0.10,
            AssetId.NAVER: -0.12,
            AssetId.CELLTRION: -0.05,
            AssetId.HANWHA: 0.25,  # defense rally
            AssetId.TESLA: -0.15,
            AssetId.NVIDIA: -0.12,
        },
        key_focus=(
            "갑작스러운 공포에는 현금으로 방어막(50~70%)을 치거나, "
            "위기에 강한 섹터를 선점하는 전략이 필요합니다."
        ),
    ),
    ScenarioDefinition(
        id=4,
        title="ROUND 4. 글로벌 팬데믹",
        description=(
            "감염병이 전 세계로 확산된다.\n도시는 멈추고, 시장은 크게 흔들린다.\n\n"
            "시간이 흐르며 각국은 전례 없는 대응책을 내놓는다.\n증시는 급락과 반등을 반복한다.\n\n"
            "지금이 기회인지, 또 한 번의 함정인지, 판단은 PB의 몫이다."
        ),
        sub_description=[
            "시간이 흐르며 각국은 전례 없는 대응책을 내놓는다. 증시는 급락과 반등을 반복한다.",
            "지금이 기회인지, 또 한 번의 함정인지, 판단은 PB의 몫입니다.",
        ],
        cash_return=0.01,
        asset_returns={
            AssetId.SAMSUNG: 0.05,
            AssetId.NAVER: 0.20,
            AssetId.CELLTRION: 0.25,
            AssetId.HANWHA: -0.10,
            AssetId.TESLA: 0.15,
            AssetId.NVIDIA: 0.10,
        },
        key_focus=(
            "위기 속에서도 침착하게 60% 정도의 주식 비중을 가져가면 어떨까요? "
            "멀리 내다보는 혜안이 필요한 때예요."
        ),
    ),
]

TOTAL_ROUNDS = len(SCENARIOS)

# Pre-filled slider values shown at the start of each allocation step
DEFAULT_ALLOCATION = AllocationInput.create(
    stock_ratio=70,
    asset_weights={
        AssetId.SAMSUNG: 20,
        AssetId.NAVER: 15,
        AssetId.CELLTRION: 15,
        AssetId.HANWHA: 10,
        AssetId.TESLA: 20,
        AssetId.NVIDIA: 20,
    },
)


def get_scenario(scenario_id: int) -> ScenarioDefinition:
    """Look up a round scenario by id"""
    for scenario in SCENARIOS:
        if scenario.id == scenario_id:
            return scenario
    raise ScenarioNotFoundError(f"No scenario with id {scenario_id}")
