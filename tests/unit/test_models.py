"""Unit tests for the validated allocation factory"""

import pytest
from pb_challenge.domain.models import AllocationInput, AssetId
from pb_challenge.domain.exceptions import InvalidAllocationError


def test_create_derives_cash_ratio(equal_weights):
    alloc = AllocationInput.create(stock_ratio=65, asset_weights=equal_weights)

    assert alloc.cash_ratio == 35
    assert alloc.stock_ratio + alloc.cash_ratio == 100


def test_create_accepts_matching_cash_ratio(equal_weights):
    alloc = AllocationInput.create(stock_ratio=33.3, asset_weights=equal_weights, cash_ratio=66.7)
    assert alloc.cash_ratio == pytest.approx(66.7)


def test_create_rejects_mismatched_cash_ratio(equal_weights):
    with pytest.raises(InvalidAllocationError, match="must equal 100"):
        AllocationInput.create(stock_ratio=60, asset_weights=equal_weights, cash_ratio=30)


@pytest.mark.parametrize("stock_ratio", [-1, 100.5])
def test_create_rejects_out_of_range_ratio(stock_ratio, equal_weights):
    with pytest.raises(InvalidAllocationError):
        AllocationInput.create(stock_ratio=stock_ratio, asset_weights=equal_weights)


def test_create_rejects_missing_weight():
    weights = {asset: 10 for asset in AssetId if asset != AssetId.TESLA}

    with pytest.raises(InvalidAllocationError, match="Tesla"):
        AllocationInput.create(stock_ratio=50, asset_weights=weights)


def test_create_rejects_negative_weight(equal_weights):
    equal_weights[AssetId.SAMSUNG] = -5

    with pytest.raises(InvalidAllocationError, match="non-negative"):
        AllocationInput.create(stock_ratio=50, asset_weights=equal_weights)


def test_create_rejects_unknown_asset(equal_weights):
    weights = {asset.value: 10 for asset in AssetId}
    weights["Kakao"] = 10

    with pytest.raises(InvalidAllocationError, match="Unknown asset"):
        AllocationInput.create(stock_ratio=50, asset_weights=weights)


def test_create_accepts_string_keys():
    """Test wire values map onto AssetId"""
    alloc = AllocationInput.create(stock_ratio=50, asset_weights={a.value: 1 for a in AssetId})
    assert set(alloc.asset_weights) == set(AssetId)


@pytest.mark.parametrize("bad_weight", [float("nan"), float("inf")])
def test_create_rejects_non_finite_weight(bad_weight, equal_weights):
    equal_weights[AssetId.NVIDIA] = bad_weight

    with pytest.raises(InvalidAllocationError, match="finite"):
        AllocationInput.create(stock_ratio=50, asset_weights=equal_weights)
