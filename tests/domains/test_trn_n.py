# tests/domains/test_trn_n.py

"""
'trn' 도메인 (교육 훈련 기록) 관련 API 엔드포인트에 대한 통합 테스트 모듈입니다.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_training_record(client: AsyncClient):
    """[성공] 교육 기록을 등록하면 입력하지 않은 선택 필드는 null입니다."""
    print("\n--- Running test_create_training_record ---")
    response = await client.post(
        "/api/training",
        json={"course": "Balance handling", "trainee": "Somchai", "assessment_level": 2, "result": "passed"},
    )
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 201
    body = response.json()
    assert body["assessment_level"] == 2
    assert body["result"] == "passed"
    assert body["trainer"] is None
    assert body["signed_date"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("level", [0, 4])
async def test_assessment_level_out_of_range(client: AsyncClient, level: int):
    """[실패] 평가 수준은 1~3만 허용합니다."""
    response = await client.post(
        "/api/training", json={"course": "GLP", "trainee": "Kim", "assessment_level": level}
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["loc"][-1] == "assessment_level"


@pytest.mark.asyncio
async def test_filter_training_by_result(client: AsyncClient):
    await client.post("/api/training", json={"course": "A", "trainee": "Kim", "result": "passed"})
    await client.post("/api/training", json={"course": "B", "trainee": "Lee", "result": "failed"})
    await client.post("/api/training", json={"course": "C", "trainee": "Park"})

    response = await client.get("/api/training", params={"result": "failed"})

    assert [t["course"] for t in response.json()] == ["B"]


@pytest.mark.asyncio
async def test_update_and_delete_training(client: AsyncClient):
    created = await client.post("/api/training", json={"course": "SOP review", "trainee": "Kim"})
    training_id = created.json()["id"]

    updated = await client.patch(
        f"/api/training/{training_id}", json={"trainer": "QA manager", "signed_date": "2024-06-10T00:00:00Z"}
    )
    assert updated.status_code == 200
    assert updated.json()["trainer"] == "QA manager"
    assert updated.json()["course"] == "SOP review"

    assert (await client.delete(f"/api/training/{training_id}")).status_code == 204
    missing = await client.get(f"/api/training/{training_id}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Training record not found"
