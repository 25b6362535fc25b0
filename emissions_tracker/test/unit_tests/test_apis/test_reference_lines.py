"""
API tests for reference line endpoints.
"""

import pytest

from emissions_tracker.test.factory.reference_line import (
    EEDIReferenceLineFactory,
    ReferenceLineFactory,
)


@pytest.mark.asyncio
async def test_list_reference_lines(test_async_client):
    """Test listing reference lines."""
    # Create test reference lines
    await ReferenceLineFactory()
    await EEDIReferenceLineFactory()

    response = await test_async_client.get("/api/reference-lines/")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 2
    assert {item["category"] for item in data} == {"PP", "EEDI"}


@pytest.mark.asyncio
async def test_filter_reference_lines_by_category(test_async_client):
    await ReferenceLineFactory(vessel_type_id=7)
    await ReferenceLineFactory(vessel_type_id=3)
    await EEDIReferenceLineFactory(vessel_type_id=7)

    response = await test_async_client.get(
        "/api/reference-lines/", params={"category": "PP"}
    )
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 2
    assert all(item["category"] == "PP" for item in data)


@pytest.mark.asyncio
async def test_filter_reference_lines_by_type_and_category(test_async_client):
    """Test the exact-match lookup used for baselines."""
    min_row = await ReferenceLineFactory(vessel_type_id=7, traj="min", d=90.0)
    max_row = await ReferenceLineFactory(vessel_type_id=7, traj="max", d=110.0)
    await ReferenceLineFactory(vessel_type_id=3)
    await EEDIReferenceLineFactory(vessel_type_id=7)

    response = await test_async_client.get(
        "/api/reference-lines/", params={"vessel_type_id": 7, "category": "PP"}
    )
    assert response.status_code == 200

    data = response.json()
    assert [item["row_id"] for item in data] == [min_row.row_id, max_row.row_id]


@pytest.mark.asyncio
async def test_invalid_category(test_async_client):
    response = await test_async_client.get(
        "/api/reference-lines/", params={"category": "XYZ"}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_pagination_reference_lines(test_async_client):
    """Test pagination for reference lines."""
    # Create 15 test reference lines
    for _ in range(15):
        await ReferenceLineFactory()

    # Get first page
    response = await test_async_client.get(
        "/api/reference-lines/", params={"skip": 0, "limit": 10}
    )
    assert response.status_code == 200
    assert len(response.json()) == 10

    # Get second page
    response = await test_async_client.get(
        "/api/reference-lines/", params={"skip": 10, "limit": 10}
    )
    assert response.status_code == 200
    assert len(response.json()) == 5


@pytest.mark.asyncio
async def test_get_reference_line_by_id(test_async_client):
    """Test retrieving a specific reference line."""
    row = await ReferenceLineFactory(d=95.5)

    response = await test_async_client.get(f"/api/reference-lines/{row.row_id}")
    assert response.status_code == 200

    data = response.json()
    assert data["row_id"] == row.row_id
    assert data["d"] == 95.5


@pytest.mark.asyncio
async def test_get_reference_line_not_found(test_async_client):
    response = await test_async_client.get("/api/reference-lines/999999")
    assert response.status_code == 404
