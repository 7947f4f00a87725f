# labtrack/domains/eqp/crud.py

"""
'eqp' 도메인의 CRUD 로직을 담당하는 모듈입니다.

장비(공구/초자)의 생성·수정과 교정 이력 추가는 하나의 쓰기 연산으로 묶여 있습니다.
라우터는 장비 CRUD만 호출하면 되고, 이력 추가를 따로 호출할 일이 없습니다.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from fastapi import HTTPException, status

from labtrack.core.crud_base import CRUDBase
from labtrack.core.store import EntityStore
from labtrack.services.status_service import retention_cutoff

from . import models as eqp_models
from . import schemas as eqp_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 교정 이력 (Calibration History Ledger) CRUD
# =============================================================================
class CRUDCalibrationHistory(CRUDBase[eqp_models.CalibrationHistory, eqp_models.CalibrationHistoryBase, eqp_models.CalibrationHistoryBase]):
    """
    장비별 교정 이력 장부입니다. 추가(append)와 조회만 제공하며, 기록은 수정/삭제하지 않습니다.
    """
    def __init__(self, kind: str):
        super().__init__(model=eqp_models.CalibrationHistory, kind=kind)

    async def append(
        self, db: EntityStore, *, obj_in: Union[eqp_models.CalibrationHistoryBase, Dict[str, Any]]
    ) -> eqp_models.CalibrationHistory:
        """새 교정 기록을 항상 추가합니다. 중복 제거는 하지 않습니다."""
        record = await super().create(db, obj_in=obj_in)
        logger.info(
            "Calibration recorded: %s equipment=%s date=%s result=%s",
            self.kind, record.equipment_id, record.calibration_date.isoformat(), record.result,
        )
        return record

    async def get_history(
        self, db: EntityStore, *, equipment_id: int, now: datetime
    ) -> List[eqp_models.CalibrationHistory]:
        """
        장비 한 대의 교정 이력을 보존 기간(기본 5년) 안에서 최신순으로 반환합니다.
        기록이 없는 장비 ID는 빈 목록입니다.
        """
        records = await self.get_multi(db, equipment_id=equipment_id)
        return sort_recent_first(within_retention(records, now))


def within_retention(records: List[Any], now: datetime) -> List[Any]:
    cutoff = retention_cutoff(now)
    return [r for r in records if r.calibration_date >= cutoff]


def sort_recent_first(records: List[Any]) -> List[Any]:
    # 같은 교정일이면 나중에 기록된 것이 먼저
    return sorted(records, key=lambda r: (r.calibration_date, r.id), reverse=True)


tool_calibration_history = CRUDCalibrationHistory(kind="tool_calibration_history")
glassware_calibration_history = CRUDCalibrationHistory(kind="glassware_calibration_history")


# =============================================================================
# 2. 교정 대상 장비 공통 CRUD
# =============================================================================
class CRUDEquipment(CRUDBase):
    """
    공구와 초자가 공유하는 CRUD.

    - `ledger`: 해당 장비 종류의 교정 이력 장부
    - `group_attribute`: 통합 이력 조회 시 묶는 기준 필드 (공구: name, 초자: type)
    - `identity_attribute`: 통합 이력에서 출처 장비를 구분하는 필드 (공구: serial_number, 초자: lot_number)
    """
    label = "Equipment"
    group_attribute = "name"
    identity_attribute = "serial_number"

    def __init__(self, model, kind: str, ledger: CRUDCalibrationHistory):
        super().__init__(model=model, kind=kind)
        self.ledger = ledger

    async def get_by_code(self, db: EntityStore, *, code: str):
        return await self.get_by_attribute(db, attribute="code", value=code)

    async def _ensure_unique_code(self, db: EntityStore, code: Optional[str], exclude_id: Optional[int] = None) -> None:
        if code is None:
            return
        existing = await self.get_by_code(db, code=code)
        if existing and existing.id != exclude_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{self.label} with this code already exists.")

    async def _record_calibration(self, db: EntityStore, db_obj) -> None:
        await self.ledger.append(db, obj_in={
            "equipment_id": db_obj.id,
            "calibration_date": db_obj.last_calibration,
            "result": db_obj.calibration_result,
            "certificate_number": db_obj.calibration_certificate,
            "calibrated_by": db_obj.calibration_by,
            "method": db_obj.calibration_method,
            "remarks": db_obj.calibration_remarks,
            "next_calibration_date": db_obj.next_calibration,
        })

    async def create(self, db: EntityStore, *, obj_in):
        """코드 중복을 확인하고 생성합니다. 교정일과 교정 결과가 모두 있으면 첫 이력을 남깁니다."""
        await self._ensure_unique_code(db, obj_in.code)
        db_obj = await super().create(db, obj_in=obj_in)

        if db_obj.last_calibration is not None and db_obj.calibration_result:
            await self._record_calibration(db, db_obj)
        return db_obj

    async def update(self, db: EntityStore, *, db_obj, obj_in):
        """
        업데이트 시 코드 중복을 검사하고, 교정일 또는 교정 결과가 이전 값과 달라진 경우에만 이력을 추가합니다.
        위치·비고 등 다른 필드만 바뀐 경우에는 이력이 늘어나지 않습니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        if update_data.get("code") is not None and update_data["code"] != db_obj.code:
            await self._ensure_unique_code(db, update_data["code"], exclude_id=db_obj.id)

        updated = await super().update(db, db_obj=db_obj, obj_in=obj_in)
        if updated is None:
            return None

        calibration_changed = (
            updated.last_calibration != db_obj.last_calibration
            or updated.calibration_result != db_obj.calibration_result
        )
        if calibration_changed and updated.last_calibration is not None and updated.calibration_result:
            await self._record_calibration(db, updated)
        return updated

    async def get_consolidated_history(
        self, db: EntityStore, *, group_value: str, now: datetime
    ) -> List[eqp_schemas.ConsolidatedCalibrationHistoryResponse]:
        """
        같은 이름(공구) 또는 종류(초자)를 가진 모든 장비의 교정 이력을 합쳐서 반환합니다.

        장비를 교체하더라도 같은 논리적 이름 아래에서 연속된 이력을 볼 수 있도록,
        각 기록에 출처 장비의 코드와 시리얼/로트 번호를 덧붙입니다.
        """
        consolidated = []
        for item in await self.get_multi(db, **{self.group_attribute: group_value}):
            for record in await self.ledger.get_multi(db, equipment_id=item.id):
                consolidated.append(eqp_schemas.ConsolidatedCalibrationHistoryResponse(
                    **record.model_dump(),
                    equipment_code=item.code,
                    **{self.identity_attribute: getattr(item, self.identity_attribute)},
                ))
        return sort_recent_first(within_retention(consolidated, now))


class CRUDTool(CRUDEquipment):
    label = "Tool"
    group_attribute = "name"
    identity_attribute = "serial_number"

    def __init__(self):
        super().__init__(model=eqp_models.Tool, kind="tools", ledger=tool_calibration_history)


class CRUDGlassware(CRUDEquipment):
    label = "Glassware"
    group_attribute = "type"
    identity_attribute = "lot_number"

    def __init__(self):
        super().__init__(model=eqp_models.Glassware, kind="glassware", ledger=glassware_calibration_history)


tool = CRUDTool()
glassware = CRUDGlassware()
