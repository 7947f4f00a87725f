# labtrack/domains/tsk/models.py

"""
'tsk' 도메인 (업무 추적)의 저장 레코드 모델을 정의하는 모듈입니다.

하위 업무(subtasks)는 독립 식별자가 없는 값 객체 목록이며, JSON 배열로 업무 레코드에 포함됩니다.
"""

from typing import Any, Dict, List, Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from labtrack.core.types import UTCDateTime


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskBase(SQLModel):
    title: str = Field(max_length=255, description="업무명")
    description: Optional[str] = Field(default=None, description="업무 설명")
    responsible: str = Field(max_length=100, description="담당자")
    start_date: Optional[UTCDateTime] = Field(default=None, description="시작일")
    due_date: Optional[UTCDateTime] = Field(default=None, description="완료 예정일")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="진행 상태")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="우선순위")
    progress: int = Field(default=0, ge=0, le=100, description="진행률 (%)")
    subtasks: List[Dict[str, Any]] = Field(default_factory=list, description="하위 업무 목록 (JSON)")


class Task(TaskBase):
    id: Optional[int] = Field(default=None)
