# labtrack/domains/rpt/routers.py

from datetime import datetime

from fastapi import APIRouter, Depends

from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore
from labtrack.services.dashboard_service import DashboardService
from . import schemas

router = APIRouter(
    tags=["Dashboard (대시보드)"],
)


@router.get("/dashboard/stats", response_model=schemas.DashboardStats, summary="대시보드 통계 조회")
async def read_dashboard_stats(
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """
    대시보드 상단 타일에 표시할 집계 값을 반환합니다.
    """
    return await DashboardService(db).get_stats(now)
