# labtrack/domains/eqp/routers.py

"""
'eqp' 도메인 (공구/측정기, 초자, 교정 이력) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Response, status

# 중앙 의존성 관리 모듈 임포트
from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore
from labtrack.services import status_service

# 도메인 관련 모듈 임포트
from . import crud as eqp_crud
from . import models as eqp_models
from . import schemas as eqp_schemas

router = APIRouter(
    tags=["Equipment & Calibration (장비 및 교정 관리)"],  # Swagger UI에 표시될 태그
    responses={404: {"description": "Not found"}},  # 이 라우터의 공통 응답 정의
)


def _calibration_fields(next_calibration: Optional[datetime], now: datetime) -> dict:
    return {
        "calibration_status": status_service.get_calibration_status(next_calibration, now),
        "days_until_calibration": (
            status_service.days_until(next_calibration, now) if next_calibration is not None else None
        ),
    }


def _tool_response(db_obj: eqp_models.Tool, now: datetime) -> eqp_schemas.ToolResponse:
    return eqp_schemas.ToolResponse(**db_obj.model_dump(), **_calibration_fields(db_obj.next_calibration, now))


def _glassware_response(db_obj: eqp_models.Glassware, now: datetime) -> eqp_schemas.GlasswareResponse:
    return eqp_schemas.GlasswareResponse(**db_obj.model_dump(), **_calibration_fields(db_obj.next_calibration, now))


# =============================================================================
# 1. 공구/측정기 (Tool) 라우터
# =============================================================================
@router.post("/tools", response_model=eqp_schemas.ToolResponse, status_code=status.HTTP_201_CREATED, summary="새 장비 등록")
async def create_tool(
    tool_in: eqp_schemas.ToolCreate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """새 장비를 등록합니다. 교정일과 교정 결과가 함께 입력되면 첫 교정 이력이 자동으로 기록됩니다."""
    return _tool_response(await eqp_crud.tool.create(db=db, obj_in=tool_in), now)


@router.get("/tools", response_model=List[eqp_schemas.ToolResponse], summary="장비 목록 조회")
async def read_tools(
    skip: int = 0,
    limit: Optional[int] = None,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    tools = await eqp_crud.tool.get_multi(db, skip=skip, limit=limit)
    return [_tool_response(t, now) for t in tools]


@router.get("/tools/{tool_id}", response_model=eqp_schemas.ToolResponse, summary="특정 장비 조회")
async def read_tool(
    tool_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await eqp_crud.tool.get(db=db, id=tool_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tool not found")
    return _tool_response(db_obj, now)


@router.patch("/tools/{tool_id}", response_model=eqp_schemas.ToolResponse, summary="장비 정보 수정")
async def update_tool(
    tool_id: int,
    tool_in: eqp_schemas.ToolUpdate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """
    장비 정보를 부분 수정합니다.
    교정일 또는 교정 결과가 바뀐 경우에만 새 교정 이력이 추가됩니다.
    """
    db_obj = await eqp_crud.tool.get(db=db, id=tool_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tool not found")
    updated = await eqp_crud.tool.update(db=db, db_obj=db_obj, obj_in=tool_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tool not found")
    return _tool_response(updated, now)


@router.delete("/tools/{tool_id}", status_code=status.HTTP_204_NO_CONTENT, summary="장비 삭제")
async def delete_tool(tool_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await eqp_crud.tool.delete(db=db, id=tool_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tool not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/tools/{tool_id}/calibration-history",
    response_model=List[eqp_schemas.CalibrationHistoryResponse],
    summary="장비 교정 이력 조회",
)
async def read_tool_calibration_history(
    tool_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """장비 한 대의 최근 5년 교정 이력을 최신순으로 조회합니다. 기록이 없으면 빈 목록입니다."""
    return await eqp_crud.tool_calibration_history.get_history(db, equipment_id=tool_id, now=now)


@router.get(
    "/tools/{tool_id}/calibration-history-by-name",
    response_model=List[eqp_schemas.ConsolidatedCalibrationHistoryResponse],
    summary="같은 이름 장비의 통합 교정 이력 조회",
)
async def read_tool_calibration_history_by_name(
    tool_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """해당 장비와 이름이 같은 모든 장비의 교정 이력을 합쳐서 조회합니다."""
    db_obj = await eqp_crud.tool.get(db=db, id=tool_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tool not found")
    return await eqp_crud.tool.get_consolidated_history(db, group_value=db_obj.name, now=now)


# =============================================================================
# 2. 초자 (Glassware) 라우터
# =============================================================================
@router.post("/glassware", response_model=eqp_schemas.GlasswareResponse, status_code=status.HTTP_201_CREATED, summary="새 초자 등록")
async def create_glassware(
    glassware_in: eqp_schemas.GlasswareCreate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    return _glassware_response(await eqp_crud.glassware.create(db=db, obj_in=glassware_in), now)


@router.get("/glassware", response_model=List[eqp_schemas.GlasswareResponse], summary="초자 목록 조회")
async def read_glassware_list(
    skip: int = 0,
    limit: Optional[int] = None,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    items = await eqp_crud.glassware.get_multi(db, skip=skip, limit=limit)
    return [_glassware_response(g, now) for g in items]


@router.get("/glassware/{glassware_id}", response_model=eqp_schemas.GlasswareResponse, summary="특정 초자 조회")
async def read_glassware(
    glassware_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await eqp_crud.glassware.get(db=db, id=glassware_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Glassware not found")
    return _glassware_response(db_obj, now)


@router.patch("/glassware/{glassware_id}", response_model=eqp_schemas.GlasswareResponse, summary="초자 정보 수정")
async def update_glassware(
    glassware_id: int,
    glassware_in: eqp_schemas.GlasswareUpdate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await eqp_crud.glassware.get(db=db, id=glassware_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Glassware not found")
    updated = await eqp_crud.glassware.update(db=db, db_obj=db_obj, obj_in=glassware_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Glassware not found")
    return _glassware_response(updated, now)


@router.delete("/glassware/{glassware_id}", status_code=status.HTTP_204_NO_CONTENT, summary="초자 삭제")
async def delete_glassware(glassware_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await eqp_crud.glassware.delete(db=db, id=glassware_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Glassware not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/glassware/{glassware_id}/calibration-history",
    response_model=List[eqp_schemas.CalibrationHistoryResponse],
    summary="초자 교정 이력 조회",
)
async def read_glassware_calibration_history(
    glassware_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    return await eqp_crud.glassware_calibration_history.get_history(db, equipment_id=glassware_id, now=now)


@router.get(
    "/glassware/{glassware_id}/calibration-history-by-type",
    response_model=List[eqp_schemas.ConsolidatedCalibrationHistoryResponse],
    summary="같은 종류 초자의 통합 교정 이력 조회",
)
async def read_glassware_calibration_history_by_type(
    glassware_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await eqp_crud.glassware.get(db=db, id=glassware_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Glassware not found")
    return await eqp_crud.glassware.get_consolidated_history(db, group_value=db_obj.type, now=now)
