"""Pytest fixtures for testing"""

import pytest
from typing import Dict
from fastapi.testclient import TestClient
from pb_challenge.api.main import create_app
from pb_challenge.api.dependencies import get_game_repository
from pb_challenge.domain.models import AssetId
from pb_challenge.infrastructure.sessions import GameRepository


@pytest.fixture
def repository() -> GameRepository:
    """Fresh session store per test"""
    return GameRepository(max_games=10)


@pytest.fixture
def client(repository: GameRepository) -> TestClient:
    """Create FastAPI test client with an isolated game store"""
    app = create_app()
    app.dependency_overrides[get_game_repository] = lambda: repository
    return TestClient(app)


@pytest.fixture
def equal_weights() -> Dict[AssetId, float]:
    """Every slider at the same position"""
    return {asset: 10 for asset in AssetId}


@pytest.fixture
def nvidia_heavy_weights() -> Dict[AssetId, float]:
    """NVIDIA at 30, others at 14 each: normalizes to NVIDIA 30%"""
    weights = {asset: 14 for asset in AssetId}
    weights[AssetId.NVIDIA] = 30
    return weights

