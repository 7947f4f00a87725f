# labtrack/domains/tsk/schemas.py

"""
'tsk' 도메인 (업무 추적)의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field as PydanticField

from labtrack.core.types import UTCDateTime
from .models import TaskPriority, TaskStatus


# =============================================================================
# 1. 하위 업무 (Subtask) 값 객체
# =============================================================================
class Subtask(BaseModel):
    title: str = PydanticField(min_length=1, max_length=255, description="하위 업무명")
    description: Optional[str] = PydanticField(default=None, description="설명")
    completed: bool = PydanticField(default=False, description="완료 여부")
    approved: Optional[bool] = PydanticField(default=None, description="승인 여부 (None: 미처리)")
    approved_by: Optional[str] = PydanticField(default=None, max_length=100, description="승인/반려자")
    approved_date: Optional[UTCDateTime] = PydanticField(default=None, description="승인/반려 일시")
    approval_notes: Optional[str] = PydanticField(default=None, description="승인/반려 의견")


# =============================================================================
# 2. 업무 (Task) 스키마
# =============================================================================
class TaskBase(BaseModel):
    title: str = PydanticField(min_length=1, max_length=255, description="업무명")
    description: Optional[str] = PydanticField(default=None, description="업무 설명")
    responsible: str = PydanticField(min_length=1, max_length=100, description="담당자")
    start_date: Optional[UTCDateTime] = PydanticField(default=None, description="시작일")
    due_date: Optional[UTCDateTime] = PydanticField(default=None, description="완료 예정일")
    status: TaskStatus = PydanticField(default=TaskStatus.PENDING, description="진행 상태")
    priority: TaskPriority = PydanticField(default=TaskPriority.MEDIUM, description="우선순위")
    progress: int = PydanticField(default=0, ge=0, le=100, description="진행률 (%)")
    subtasks: List[Subtask] = PydanticField(default_factory=list, description="하위 업무 목록")


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):  # 업데이트는 모두 Optional, subtasks는 통째로 교체
    title: Optional[str] = PydanticField(None, min_length=1, max_length=255)
    description: Optional[str] = None
    responsible: Optional[str] = PydanticField(None, min_length=1, max_length=100)
    start_date: Optional[UTCDateTime] = None
    due_date: Optional[UTCDateTime] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    progress: Optional[int] = PydanticField(None, ge=0, le=100)
    subtasks: Optional[List[Subtask]] = None


class TaskResponse(TaskBase):
    id: int = PydanticField(description="업무 고유 ID")

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# 3. 하위 업무 일괄 승인 스키마
# =============================================================================
class SubtaskApproval(BaseModel):
    subtask_index: int = PydanticField(ge=0, description="대상 하위 업무의 순번 (0부터)")
    action: Literal["approve", "reject"] = PydanticField(description="승인 또는 반려")
    notes: Optional[str] = PydanticField(default=None, description="의견")


class SubtaskApprovalBatch(BaseModel):
    approved_by: str = PydanticField(min_length=1, max_length=100, description="승인자")
    approvals: List[SubtaskApproval] = PydanticField(min_length=1, description="하위 업무별 처리 목록")
