"""GET /v1/stocks, /v1/scenarios - Static game catalog"""

from typing import List
from fastapi import APIRouter, HTTPException

from pb_challenge.api.v1.schemas import AllocationSchema, ScenarioSchema, StockSchema
from pb_challenge.domain.catalog import DEFAULT_ALLOCATION, SCENARIOS, STOCK_LIST, get_scenario
from pb_challenge.domain.exceptions import ScenarioNotFoundError
from pb_challenge.domain.models import ScenarioDefinition

router = APIRouter()


def to_scenario_schema(scenario: ScenarioDefinition) -> ScenarioSchema:
    return ScenarioSchema(
        id=scenario.id,
        title=scenario.title,
        description=scenario.description,
        sub_description=scenario.sub_description,
        key_focus=scenario.key_focus,
        cash_return=scenario.cash_return,
        asset_returns=scenario.asset_returns,
    )


@router.get("/stocks", response_model=List[StockSchema])
def list_stocks():
    """List the six tradable stocks in display order"""
    return [StockSchema(id=s.id, name=s.name, sector=s.sector) for s in STOCK_LIST]


@router.get("/scenarios", response_model=List[ScenarioSchema])
def list_scenarios():
    """List the round scenarios in play order"""
    return [to_scenario_schema(s) for s in SCENARIOS]


@router.get("/scenarios/{scenario_id}", response_model=ScenarioSchema)
def get_scenario_by_id(scenario_id: int):
    try:
        scenario = get_scenario(scenario_id)
    except ScenarioNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return to_scenario_schema(scenario)


@router.get("/allocation/default", response_model=AllocationSchema)
def get_default_allocation():
    """Slider values the allocation screens start from"""
    return AllocationSchema(
        stock_ratio=DEFAULT_ALLOCATION.stock_ratio,
        cash_ratio=DEFAULT_ALLOCATION.cash_ratio,
        asset_weights=DEFAULT_ALLOCATION.asset_weights,
    )
