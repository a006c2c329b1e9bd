"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from pb_challenge.domain.models import AllocationInput
from pb_challenge.api.v1.schemas import AllocationSchema
from pb_challenge.infrastructure.sessions import GameRepository, game_repository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_game_repository() -> GameRepository:
    """Provide the process-wide game session store"""
    return game_repository


def to_allocation(schema: AllocationSchema) -> AllocationInput:
    """
    Build a validated domain allocation from the request body.

    Raises:
        InvalidAllocationError: via AllocationInput.create
    """
    return AllocationInput.create(
        stock_ratio=schema.stock_ratio,
        asset_weights=schema.asset_weights,
        cash_ratio=schema.cash_ratio,
    )


