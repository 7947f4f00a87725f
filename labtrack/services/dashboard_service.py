# labtrack/services/dashboard_service.py

"""
여러 도메인의 데이터를 모아 대시보드 집계를 계산하는 서비스 모듈입니다.

각 도메인의 `crud` 모듈을 통해서만 데이터를 읽으며, 상태 판정은 status_service를 사용합니다.
"""

from datetime import datetime

from labtrack.core.store import EntityStore
from labtrack.domains.eqp import crud as eqp_crud
from labtrack.domains.inv import crud as inv_crud
from labtrack.domains.trn import crud as trn_crud
from labtrack.domains.trn.models import TrainingResult
from labtrack.domains.tsk import crud as tsk_crud
from labtrack.domains.tsk.models import TaskStatus
from labtrack.services.status_service import (
    CalibrationStatus,
    ExpiryStatus,
    get_calibration_status,
    get_expiry_status,
)


class DashboardService:
    """
    대시보드 통계를 계산하는 서비스 클래스입니다.
    """

    def __init__(self, db: EntityStore):
        self.db = db

    async def get_stats(self, now: datetime) -> dict:
        """
        - overdue_count: 교정 기한이 지난 공구/초자 + 유효기간이 지난 시약
        - expired_chemicals: 유효기간이 지난 시약
        - calibration_due: 교정 예정(due-soon) 공구/초자
        - pending_tasks / in_progress_tasks: 상태별 업무 수
        - completed_training: 평가 결과가 passed인 교육 기록
        """
        equipment = (
            await eqp_crud.tool.get_multi(self.db)
            + await eqp_crud.glassware.get_multi(self.db)
        )
        calibration = [get_calibration_status(e.next_calibration, now) for e in equipment]
        chemicals = await inv_crud.chemical.get_multi(self.db)
        expired = sum(1 for c in chemicals if get_expiry_status(c.expiry_date, now) == ExpiryStatus.EXPIRED)

        return {
            "overdue_count": calibration.count(CalibrationStatus.OVERDUE) + expired,
            "expired_chemicals": expired,
            "calibration_due": calibration.count(CalibrationStatus.DUE_SOON),
            "pending_tasks": len(await tsk_crud.task.get_multi(self.db, status=TaskStatus.PENDING)),
            "in_progress_tasks": len(await tsk_crud.task.get_multi(self.db, status=TaskStatus.IN_PROGRESS)),
            "completed_training": len(await trn_crud.training.get_multi(self.db, result=TrainingResult.PASSED)),
        }
