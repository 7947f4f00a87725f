# labtrack/domains/trn/schemas.py

"""
'trn' 도메인 (교육 훈련 기록)의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field as PydanticField

from labtrack.core.types import UTCDateTime
from .models import TrainingResult


class TrainingBase(BaseModel):
    sequence: Optional[str] = PydanticField(default=None, max_length=50, description="순번")
    course: str = PydanticField(min_length=1, max_length=255, description="교육 과정명")
    start_date: Optional[UTCDateTime] = PydanticField(default=None, description="교육 시작일")
    end_date: Optional[UTCDateTime] = PydanticField(default=None, description="교육 종료일")
    assessment_level: Optional[int] = PydanticField(default=None, ge=1, le=3, description="평가 수준 (1~3)")
    result: Optional[TrainingResult] = PydanticField(default=None, description="평가 결과")
    trainee: str = PydanticField(min_length=1, max_length=100, description="교육생")
    acknowledged_date: Optional[UTCDateTime] = PydanticField(default=None, description="교육생 확인일")
    trainer: Optional[str] = PydanticField(default=None, max_length=100, description="강사")
    signed_date: Optional[UTCDateTime] = PydanticField(default=None, description="강사 서명일")
    notes: Optional[str] = PydanticField(default=None, description="비고")


class TrainingCreate(TrainingBase):
    pass


class TrainingUpdate(BaseModel):  # 업데이트는 모두 Optional
    sequence: Optional[str] = PydanticField(None, max_length=50)
    course: Optional[str] = PydanticField(None, min_length=1, max_length=255)
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    assessment_level: Optional[int] = PydanticField(None, ge=1, le=3)
    result: Optional[TrainingResult] = None
    trainee: Optional[str] = PydanticField(None, min_length=1, max_length=100)
    acknowledged_date: Optional[UTCDateTime] = None
    trainer: Optional[str] = PydanticField(None, max_length=100)
    signed_date: Optional[UTCDateTime] = None
    notes: Optional[str] = None


class TrainingResponse(TrainingBase):
    id: int = PydanticField(description="교육 기록 고유 ID")

    model_config = ConfigDict(from_attributes=True)
