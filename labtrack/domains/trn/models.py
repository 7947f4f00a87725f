# labtrack/domains/trn/models.py

"""
'trn' 도메인 (교육 훈련 기록)의 저장 레코드 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from labtrack.core.types import UTCDateTime


class TrainingResult(str, Enum):
    PASSED = "passed"
    FAILED = "failed"


class TrainingBase(SQLModel):
    sequence: Optional[str] = Field(default=None, max_length=50, description="순번")
    course: str = Field(max_length=255, description="교육 과정명")
    start_date: Optional[UTCDateTime] = Field(default=None, description="교육 시작일")
    end_date: Optional[UTCDateTime] = Field(default=None, description="교육 종료일")
    assessment_level: Optional[int] = Field(default=None, ge=1, le=3, description="평가 수준 (1~3)")
    result: Optional[TrainingResult] = Field(default=None, description="평가 결과")
    trainee: str = Field(max_length=100, description="교육생")
    acknowledged_date: Optional[UTCDateTime] = Field(default=None, description="교육생 확인일")
    trainer: Optional[str] = Field(default=None, max_length=100, description="강사")
    signed_date: Optional[UTCDateTime] = Field(default=None, description="강사 서명일")
    notes: Optional[str] = Field(default=None, description="비고")


class Training(TrainingBase):
    id: Optional[int] = Field(default=None)
