# labtrack/domains/tsk/crud.py

"""
'tsk' 도메인의 CRUD 로직을 담당하는 모듈입니다.

업무 상태(status)는 닫힌 열거형이지만 전이는 자유롭게 허용합니다.
하위 업무 승인은 상위 업무의 progress/status를 다시 계산하지 않습니다 (수동 관리).
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException, status

from labtrack.core.crud_base import CRUDBase
from labtrack.core.store import EntityStore

from . import models as tsk_models
from . import schemas as tsk_schemas

logger = logging.getLogger(__name__)


class CRUDTask(CRUDBase[tsk_models.Task, tsk_schemas.TaskCreate, tsk_schemas.TaskUpdate]):
    def __init__(self):
        super().__init__(model=tsk_models.Task, kind="tasks")

    async def apply_approvals(
        self,
        db: EntityStore,
        *,
        db_obj: tsk_models.Task,
        batch: tsk_schemas.SubtaskApprovalBatch,
        now: datetime,
    ) -> Optional[tsk_models.Task]:
        """
        하위 업무 승인/반려를 일괄 적용합니다.

        목록에 있는 하위 업무에만 approved / approved_by / approved_date / approval_notes를 기록하며,
        하나라도 범위를 벗어난 순번이 있으면 아무것도 변경하지 않고 400을 반환합니다.
        """
        subtasks = [dict(s) for s in db_obj.subtasks]
        for approval in batch.approvals:
            if approval.subtask_index >= len(subtasks):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Subtask index {approval.subtask_index} is out of range.",
                )

        for approval in batch.approvals:
            subtasks[approval.subtask_index].update({
                "approved": approval.action == "approve",
                "approved_by": batch.approved_by,
                "approved_date": now,
                "approval_notes": approval.notes,
            })

        logger.info("Task #%s: %d subtask approval(s) by %s", db_obj.id, len(batch.approvals), batch.approved_by)
        # 값 객체 검증을 거쳐 통째로 교체
        return await self.update(db, db_obj=db_obj, obj_in=tsk_schemas.TaskUpdate(subtasks=subtasks))


task = CRUDTask()
