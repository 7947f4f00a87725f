# tests/domains/test_tsk_n.py

"""
'tsk' 도메인 (업무 추적) 관련 API 엔드포인트에 대한 통합 테스트 모듈입니다.

- 업무 CRUD와 상태 필터링
- 하위 업무 목록의 통째 교체
- 하위 업무 일괄 승인/반려 (상위 업무의 진행률/상태는 바뀌지 않음)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture(name="calibration_plan")
async def calibration_plan_fixture(client: AsyncClient) -> dict:
    """하위 업무 3개를 가진 업무를 생성합니다."""
    response = await client.post(
        "/api/tasks",
        json={
            "title": "Annual calibration plan",
            "responsible": "Lab manager",
            "status": "in_progress",
            "progress": 40,
            "subtasks": [
                {"title": "Collect quotations"},
                {"title": "Schedule vendor"},
                {"title": "Update equipment list", "completed": True},
            ],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_task_defaults(client: AsyncClient):
    """[성공] 상태/우선순위/진행률 기본값을 확인합니다."""
    print("\n--- Running test_create_task_defaults ---")
    response = await client.post("/api/tasks", json={"title": "Order reagents", "responsible": "Kim"})

    assert response.status_code == 201
    body = response.json()
    assert (body["status"], body["priority"], body["progress"], body["subtasks"]) == ("pending", "medium", 0, [])


@pytest.mark.asyncio
async def test_task_progress_out_of_range(client: AsyncClient):
    response = await client.post("/api/tasks", json={"title": "X", "responsible": "Kim", "progress": 150})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_filter_tasks_by_status(client: AsyncClient, calibration_plan: dict):
    await client.post("/api/tasks", json={"title": "Order reagents", "responsible": "Kim"})

    pending = await client.get("/api/tasks", params={"status": "pending"})
    in_progress = await client.get("/api/tasks", params={"status": "in_progress"})

    assert [t["title"] for t in pending.json()] == ["Order reagents"]
    assert [t["title"] for t in in_progress.json()] == ["Annual calibration plan"]


@pytest.mark.asyncio
async def test_status_change_is_permissive(client: AsyncClient, calibration_plan: dict):
    """[성공] 업무 상태는 열거형 안에서 자유롭게 바꿀 수 있습니다."""
    response = await client.patch(f"/api/tasks/{calibration_plan['id']}", json={"status": "pending"})

    assert response.status_code == 200
    assert response.json()["status"] == "pending"


@pytest.mark.asyncio
async def test_update_replaces_subtasks_wholesale(client: AsyncClient, calibration_plan: dict):
    """[성공] subtasks를 보내면 기존 목록 전체가 새 목록으로 교체됩니다."""
    print("\n--- Running test_update_replaces_subtasks_wholesale ---")
    response = await client.patch(
        f"/api/tasks/{calibration_plan['id']}", json={"subtasks": [{"title": "Only step"}]}
    )

    assert response.status_code == 200
    assert [s["title"] for s in response.json()["subtasks"]] == ["Only step"]
    assert response.json()["title"] == "Annual calibration plan"


@pytest.mark.asyncio
async def test_apply_subtask_approvals(client: AsyncClient, calibration_plan: dict):
    """
    [성공] 지정한 하위 업무에만 승인/반려가 기록되고,
    상위 업무의 진행률과 상태는 그대로 유지됩니다.
    """
    print("\n--- Running test_apply_subtask_approvals ---")
    response = await client.post(
        f"/api/tasks/{calibration_plan['id']}/approvals",
        json={
            "approved_by": "QA manager",
            "approvals": [
                {"subtask_index": 0, "action": "approve", "notes": "OK"},
                {"subtask_index": 2, "action": "reject", "notes": "List incomplete"},
            ],
        },
    )
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 200
    body = response.json()
    first, second, third = body["subtasks"]
    assert first["approved"] is True
    assert first["approved_by"] == "QA manager"
    assert first["approval_notes"] == "OK"
    assert first["approved_date"].startswith("2024-06-15")
    assert second["approved"] is None
    assert second["approved_by"] is None
    assert third["approved"] is False
    assert third["completed"] is True

    assert body["progress"] == 40
    assert body["status"] == "in_progress"


@pytest.mark.asyncio
async def test_approvals_out_of_range_change_nothing(client: AsyncClient, calibration_plan: dict):
    """[실패] 범위를 벗어난 순번이 섞여 있으면 400이며 어떤 하위 업무도 바뀌지 않습니다."""
    print("\n--- Running test_approvals_out_of_range_change_nothing ---")
    response = await client.post(
        f"/api/tasks/{calibration_plan['id']}/approvals",
        json={
            "approved_by": "QA manager",
            "approvals": [
                {"subtask_index": 0, "action": "approve"},
                {"subtask_index": 3, "action": "approve"},
            ],
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Subtask index 3 is out of range."

    task = (await client.get(f"/api/tasks/{calibration_plan['id']}")).json()
    assert all(s["approved"] is None for s in task["subtasks"])


@pytest.mark.asyncio
async def test_approvals_validation(client: AsyncClient, calibration_plan: dict):
    empty = await client.post(
        f"/api/tasks/{calibration_plan['id']}/approvals", json={"approved_by": "QA", "approvals": []}
    )
    bad_action = await client.post(
        f"/api/tasks/{calibration_plan['id']}/approvals",
        json={"approved_by": "QA", "approvals": [{"subtask_index": 0, "action": "maybe"}]},
    )

    assert empty.status_code == 400
    assert bad_action.status_code == 400


@pytest.mark.asyncio
async def test_approvals_for_missing_task(client: AsyncClient):
    response = await client.post(
        "/api/tasks/999/approvals",
        json={"approved_by": "QA", "approvals": [{"subtask_index": 0, "action": "approve"}]},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found"
