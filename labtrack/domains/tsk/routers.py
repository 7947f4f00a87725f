# labtrack/domains/tsk/routers.py

"""
'tsk' 도메인 (업무 추적) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore

from . import crud as tsk_crud
from . import models as tsk_models
from . import schemas as tsk_schemas

router = APIRouter(
    tags=["Task Tracking (업무 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/tasks", response_model=tsk_schemas.TaskResponse, status_code=status.HTTP_201_CREATED, summary="새 업무 등록")
async def create_task(task_in: tsk_schemas.TaskCreate, db: EntityStore = Depends(deps.get_store)):
    return await tsk_crud.task.create(db=db, obj_in=task_in)


@router.get("/tasks", response_model=List[tsk_schemas.TaskResponse], summary="업무 목록 조회")
async def read_tasks(
    skip: int = 0,
    limit: Optional[int] = None,
    status_filter: Optional[tsk_models.TaskStatus] = Query(None, alias="status"),
    db: EntityStore = Depends(deps.get_store),
):
    filter_kwargs = {"status": status_filter} if status_filter else {}
    return await tsk_crud.task.get_multi(db, skip=skip, limit=limit, **filter_kwargs)


@router.get("/tasks/{task_id}", response_model=tsk_schemas.TaskResponse, summary="특정 업무 조회")
async def read_task(task_id: int, db: EntityStore = Depends(deps.get_store)):
    db_obj = await tsk_crud.task.get(db=db, id=task_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return db_obj


@router.patch("/tasks/{task_id}", response_model=tsk_schemas.TaskResponse, summary="업무 수정")
async def update_task(task_id: int, task_in: tsk_schemas.TaskUpdate, db: EntityStore = Depends(deps.get_store)):
    """업무를 부분 수정합니다. `subtasks`를 보내면 하위 업무 목록 전체가 교체됩니다."""
    db_obj = await tsk_crud.task.get(db=db, id=task_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    updated = await tsk_crud.task.update(db=db, db_obj=db_obj, obj_in=task_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return updated


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="업무 삭제")
async def delete_task(task_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await tsk_crud.task.delete(db=db, id=task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/tasks/{task_id}/approvals", response_model=tsk_schemas.TaskResponse, summary="하위 업무 일괄 승인/반려")
async def approve_subtasks(
    task_id: int,
    batch_in: tsk_schemas.SubtaskApprovalBatch,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """
    여러 하위 업무를 한 번에 승인 또는 반려합니다.
    상위 업무의 진행률과 상태는 자동으로 바뀌지 않습니다.
    """
    db_obj = await tsk_crud.task.get(db=db, id=task_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    updated = await tsk_crud.task.apply_approvals(db, db_obj=db_obj, batch=batch_in, now=now)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return updated
