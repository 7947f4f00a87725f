# tests/domains/test_eqp_n.py

"""
'eqp' 도메인 (공구/측정기, 초자, 교정 이력) 관련 API 엔드포인트에 대한 통합 테스트 모듈입니다.

- 장비 생성/수정 시 교정 이력이 자동으로 추가되는 조건을 검증합니다.
- 5년 보존 기간, 최신순 정렬, 이름(공구)/종류(초자)별 통합 이력 조회를 검증합니다.
- 파생 교정 상태(calibration_status)와 코드 중복 검사를 검증합니다.
"""

from datetime import datetime, UTC

import pytest
import pytest_asyncio
from httpx import AsyncClient

from labtrack.core.store import InMemoryStore
from labtrack.domains.eqp import crud as eqp_crud

BALANCE_NAME = "เครื่องชั่งดิจิตอล"
PASS = "ผ่าน"
FAIL = "ไม่ผ่าน"


def tool_payload(**overrides) -> dict:
    payload = {
        "code": "BAL-001",
        "name": BALANCE_NAME,
        "brand": "Mettler Toledo",
        "serial_number": "SN-001",
        "location": "Lab 1",
        "last_calibration": "2024-01-01T00:00:00Z",
        "calibration_result": PASS,
        "next_calibration": "2024-07-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture(name="balance_tool")
async def balance_tool_fixture(client: AsyncClient) -> dict:
    """교정 정보가 있는 공구 1대를 API로 생성하고 응답 JSON을 반환합니다."""
    response = await client.post("/api/tools", json=tool_payload())
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# 1. 공구 생성 / 조회
# =============================================================================
@pytest.mark.asyncio
async def test_create_tool_records_first_calibration(client: AsyncClient, balance_tool: dict):
    """
    [성공] 교정일과 교정 결과가 있는 공구를 생성하면 이력이 정확히 1건 생기고,
    2024-06-15 기준으로 16일 남은 due-soon 상태가 됩니다.
    """
    print("\n--- Running test_create_tool_records_first_calibration ---")
    assert balance_tool["id"] > 0
    assert balance_tool["calibration_status"] == "due-soon"
    assert balance_tool["days_until_calibration"] == 16

    response = await client.get(f"/api/tools/{balance_tool['id']}/calibration-history")
    print(f"History: {response.json()}")

    assert response.status_code == 200
    history = response.json()
    assert len(history) == 1
    assert history[0]["equipment_id"] == balance_tool["id"]
    assert history[0]["result"] == PASS
    assert history[0]["calibration_date"].startswith("2024-01-01")
    assert history[0]["next_calibration_date"].startswith("2024-07-01")


@pytest.mark.asyncio
async def test_create_tool_without_result_has_no_history(client: AsyncClient):
    """[성공] 교정 결과가 없으면 교정일이 있어도 이력을 만들지 않습니다."""
    print("\n--- Running test_create_tool_without_result_has_no_history ---")
    response = await client.post("/api/tools", json=tool_payload(calibration_result=None))
    tool_id = response.json()["id"]

    history = await client.get(f"/api/tools/{tool_id}/calibration-history")

    assert history.json() == []


@pytest.mark.asyncio
async def test_tool_without_next_calibration_is_unspecified(client: AsyncClient):
    response = await client.post("/api/tools", json={"code": "TH-01", "name": "Thermometer"})

    assert response.status_code == 201
    body = response.json()
    assert body["calibration_status"] == "unspecified"
    assert body["days_until_calibration"] is None
    assert body["status"] == "active"
    assert body["brand"] is None


@pytest.mark.asyncio
async def test_create_tool_duplicate_code(client: AsyncClient, balance_tool: dict):
    """[실패] 이미 사용 중인 장비 코드로 생성하면 400을 반환합니다."""
    print("\n--- Running test_create_tool_duplicate_code ---")
    response = await client.post("/api/tools", json=tool_payload(serial_number="SN-999"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Tool with this code already exists."


@pytest.mark.asyncio
async def test_update_tool_to_duplicate_code(client: AsyncClient, balance_tool: dict):
    other = await client.post("/api/tools", json=tool_payload(code="BAL-002"))

    response = await client.patch(f"/api/tools/{other.json()['id']}", json={"code": "BAL-001"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_read_tools_list(client: AsyncClient, balance_tool: dict):
    await client.post("/api/tools", json=tool_payload(code="BAL-002"))

    response = await client.get("/api/tools")

    assert response.status_code == 200
    assert [t["code"] for t in response.json()] == ["BAL-001", "BAL-002"]

    limited = await client.get("/api/tools", params={"skip": 1, "limit": 1})
    assert [t["code"] for t in limited.json()] == ["BAL-002"]


# =============================================================================
# 2. 공구 수정에 따른 이력 추가 규칙
# =============================================================================
@pytest.mark.asyncio
async def test_update_notes_does_not_append_history(client: AsyncClient, balance_tool: dict):
    """[성공] 비고만 수정하면 이력 건수는 그대로 1건입니다."""
    print("\n--- Running test_update_notes_does_not_append_history ---")
    response = await client.patch(f"/api/tools/{balance_tool['id']}", json={"notes": "Moved to bench 3"})

    assert response.status_code == 200
    assert response.json()["notes"] == "Moved to bench 3"
    assert response.json()["calibration_result"] == PASS

    history = await client.get(f"/api/tools/{balance_tool['id']}/calibration-history")
    assert len(history.json()) == 1


@pytest.mark.asyncio
async def test_update_result_appends_history_newest_first(client: AsyncClient, balance_tool: dict):
    """[성공] 교정일은 같고 결과만 바뀌어도 이력이 추가되며, 나중 기록이 먼저 나옵니다."""
    print("\n--- Running test_update_result_appends_history_newest_first ---")
    response = await client.patch(f"/api/tools/{balance_tool['id']}", json={"calibration_result": FAIL})
    assert response.status_code == 200

    history = (await client.get(f"/api/tools/{balance_tool['id']}/calibration-history")).json()
    print(f"History: {history}")

    assert len(history) == 2
    assert [h["result"] for h in history] == [FAIL, PASS]


@pytest.mark.asyncio
async def test_update_calibration_date_appends_history(client: AsyncClient, balance_tool: dict):
    await client.patch(
        f"/api/tools/{balance_tool['id']}",
        json={"last_calibration": "2024-06-01T00:00:00Z", "next_calibration": "2025-06-01T00:00:00Z"},
    )

    history = (await client.get(f"/api/tools/{balance_tool['id']}/calibration-history")).json()

    assert [h["calibration_date"][:10] for h in history] == ["2024-06-01", "2024-01-01"]


@pytest.mark.asyncio
async def test_update_same_calibration_values_does_not_append(client: AsyncClient, balance_tool: dict):
    await client.patch(
        f"/api/tools/{balance_tool['id']}",
        json={"last_calibration": "2024-01-01T00:00:00Z", "calibration_result": PASS},
    )

    history = (await client.get(f"/api/tools/{balance_tool['id']}/calibration-history")).json()

    assert len(history) == 1


@pytest.mark.asyncio
async def test_update_missing_tool(client: AsyncClient):
    """[실패] 존재하지 않는 공구 수정은 404입니다."""
    response = await client.patch("/api/tools/999", json={"notes": "x"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Tool not found"


@pytest.mark.asyncio
async def test_delete_tool(client: AsyncClient, balance_tool: dict):
    response = await client.delete(f"/api/tools/{balance_tool['id']}")
    assert response.status_code == 204

    assert (await client.get(f"/api/tools/{balance_tool['id']}")).status_code == 404
    assert (await client.delete(f"/api/tools/{balance_tool['id']}")).status_code == 404


# =============================================================================
# 3. 보존 기간 / 통합 이력
# =============================================================================
@pytest.mark.asyncio
async def test_history_excludes_records_older_than_five_years(client: AsyncClient):
    """[성공] 기준 시각 5년 이전의 교정 기록은 조회되지 않습니다."""
    print("\n--- Running test_history_excludes_records_older_than_five_years ---")
    created = await client.post(
        "/api/tools",
        json=tool_payload(last_calibration="2019-06-14T00:00:00Z", next_calibration="2020-06-14T00:00:00Z"),
    )
    tool_id = created.json()["id"]
    assert created.json()["calibration_status"] == "overdue"

    assert (await client.get(f"/api/tools/{tool_id}/calibration-history")).json() == []

    await client.patch(f"/api/tools/{tool_id}", json={"last_calibration": "2019-06-15T00:00:00Z"})
    history = (await client.get(f"/api/tools/{tool_id}/calibration-history")).json()
    assert [h["calibration_date"][:10] for h in history] == ["2019-06-15"]


@pytest.mark.asyncio
async def test_history_for_unknown_tool_is_empty(client: AsyncClient):
    response = await client.get("/api/tools/12345/calibration-history")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_consolidated_history_by_name(client: AsyncClient):
    """[성공] 이름이 같은 공구 2대의 이력이 출처 코드와 함께 날짜 내림차순으로 합쳐집니다."""
    print("\n--- Running test_consolidated_history_by_name ---")
    first = await client.post("/api/tools", json=tool_payload(code="BAL-001", serial_number="SN-001"))
    second = await client.post(
        "/api/tools",
        json=tool_payload(code="BAL-002", serial_number="SN-002", last_calibration="2024-03-01T00:00:00Z"),
    )
    await client.post("/api/tools", json=tool_payload(code="PH-001", name="pH meter"))
    assert first.json()["id"] != second.json()["id"]

    response = await client.get(f"/api/tools/{first.json()['id']}/calibration-history-by-name")
    print(f"Consolidated: {response.json()}")

    assert response.status_code == 200
    records = response.json()
    assert [(r["equipment_code"], r["serial_number"]) for r in records] == [("BAL-002", "SN-002"), ("BAL-001", "SN-001")]
    assert records[0]["calibration_date"].startswith("2024-03-01")
    assert records[1]["equipment_id"] == first.json()["id"]


@pytest.mark.asyncio
async def test_consolidated_history_for_missing_tool(client: AsyncClient):
    """[실패] 기준 공구가 없으면 404입니다."""
    response = await client.get("/api/tools/999/calibration-history-by-name")

    assert response.status_code == 404


# =============================================================================
# 4. 초자 (Glassware)
# =============================================================================
@pytest.mark.asyncio
async def test_glassware_history_by_type(client: AsyncClient):
    """[성공] 종류가 같은 초자의 이력을 로트 번호와 함께 합쳐서 조회합니다."""
    print("\n--- Running test_glassware_history_by_type ---")
    flask_payload = {
        "type": "Volumetric flask 100 mL",
        "glass_class": "A",
        "last_calibration": "2024-02-01T00:00:00Z",
        "next_calibration": "2025-02-01T00:00:00Z",
        "calibration_result": PASS,
    }
    flask_a = await client.post("/api/glassware", json={**flask_payload, "code": "VF-01", "lot_number": "L-A"})
    flask_b = await client.post(
        "/api/glassware",
        json={**flask_payload, "code": "VF-02", "lot_number": "L-B", "last_calibration": "2024-04-01T00:00:00Z"},
    )
    await client.post("/api/glassware", json={**flask_payload, "code": "PP-01", "type": "Pipette 10 mL"})
    assert flask_a.status_code == 201
    assert flask_a.json()["calibration_status"] == "normal"

    own = await client.get(f"/api/glassware/{flask_a.json()['id']}/calibration-history")
    assert len(own.json()) == 1

    response = await client.get(f"/api/glassware/{flask_b.json()['id']}/calibration-history-by-type")

    assert response.status_code == 200
    assert [(r["equipment_code"], r["lot_number"]) for r in response.json()] == [("VF-02", "L-B"), ("VF-01", "L-A")]


@pytest.mark.asyncio
async def test_glassware_duplicate_code_and_missing(client: AsyncClient):
    await client.post("/api/glassware", json={"code": "VF-01", "type": "Volumetric flask"})

    duplicate = await client.post("/api/glassware", json={"code": "VF-01", "type": "Beaker"})
    missing = await client.get("/api/glassware/999/calibration-history-by-type")

    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Glassware with this code already exists."
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Glassware not found"


# =============================================================================
# 5. 교정 이력 장부 (CRUD 직접 호출)
# =============================================================================
@pytest.mark.asyncio
async def test_ledger_append_never_deduplicates(store: InMemoryStore):
    """[성공] 같은 내용의 기록도 매번 새 기록으로 추가됩니다."""
    print("\n--- Running test_ledger_append_never_deduplicates ---")
    record = {"equipment_id": 7, "calibration_date": datetime(2024, 1, 1, tzinfo=UTC), "result": PASS}

    first = await eqp_crud.tool_calibration_history.append(store, obj_in=record)
    second = await eqp_crud.tool_calibration_history.append(store, obj_in=record)

    history = await eqp_crud.tool_calibration_history.get_history(
        store, equipment_id=7, now=datetime(2024, 6, 15, tzinfo=UTC)
    )
    assert first.id != second.id
    assert [h.id for h in history] == [second.id, first.id]


@pytest.mark.asyncio
async def test_ledgers_are_separate_per_equipment_kind(store: InMemoryStore):
    record = {"equipment_id": 1, "calibration_date": datetime(2024, 1, 1, tzinfo=UTC), "result": PASS}
    await eqp_crud.tool_calibration_history.append(store, obj_in=record)

    glassware_history = await eqp_crud.glassware_calibration_history.get_history(
        store, equipment_id=1, now=datetime(2024, 6, 15, tzinfo=UTC)
    )

    assert glassware_history == []
