# labtrack/domains/eqp/models.py

"""
'eqp' 도메인 (교정 대상 장비: 공구/측정기, 초자)의 저장 레코드 모델을 정의하는 모듈입니다.

장비 레코드의 교정 필드(last_calibration, calibration_result 등)는 교정 이력(ledger)의
가장 최근 항목을 복제한 값입니다. 두 값의 동기화는 crud 계층의 단일 쓰기 연산이 보장합니다.
"""

from typing import Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from labtrack.core.types import UTCDateTime


class ToolStatus(str, Enum):
    ACTIVE = "active"
    REPAIR = "repair"
    RETIRED = "retired"


# =============================================================================
# 0. 공통 교정 필드
# =============================================================================
class CalibrationFields(SQLModel):
    last_calibration: Optional[UTCDateTime] = Field(default=None, description="최근 교정일")
    next_calibration: Optional[UTCDateTime] = Field(default=None, description="다음 교정 예정일")
    calibration_result: Optional[str] = Field(default=None, max_length=100, description="교정 결과 (예: 합격/불합격/조정)")
    calibration_certificate: Optional[str] = Field(default=None, max_length=100, description="교정 성적서 번호")
    calibration_by: Optional[str] = Field(default=None, max_length=100, description="교정 기관/담당자")
    calibration_method: Optional[str] = Field(default=None, description="교정 방법")
    calibration_remarks: Optional[str] = Field(default=None, description="교정 비고")


# =============================================================================
# 1. tools 레코드 모델
# =============================================================================
class ToolBase(CalibrationFields):
    code: str = Field(max_length=50, description="장비 코드 (고유)")
    name: str = Field(max_length=255, description="장비명 - 교정 이력 통합 조회의 기준")
    brand: Optional[str] = Field(default=None, max_length=100, description="제조사")
    serial_number: Optional[str] = Field(default=None, max_length=100, description="시리얼 번호")
    range: Optional[str] = Field(default=None, max_length=100, description="측정 범위")
    location: Optional[str] = Field(default=None, max_length=255, description="보관 위치")
    responsible: Optional[str] = Field(default=None, max_length=100, description="담당자")
    notes: Optional[str] = Field(default=None, description="비고")
    status: ToolStatus = Field(default=ToolStatus.ACTIVE, description="사용 상태")
    repair_date: Optional[UTCDateTime] = Field(default=None, description="수리 의뢰일")
    expected_return_date: Optional[UTCDateTime] = Field(default=None, description="수리 후 반환 예정일")
    repair_remarks: Optional[str] = Field(default=None, description="수리 비고")


class Tool(ToolBase):
    id: Optional[int] = Field(default=None, description="장비 고유 ID")


# =============================================================================
# 2. glassware 레코드 모델
# =============================================================================
class GlasswareBase(CalibrationFields):
    code: str = Field(max_length=50, description="초자 코드 (고유)")
    lot_number: Optional[str] = Field(default=None, max_length=100, description="로트 번호")
    type: str = Field(max_length=100, description="초자 종류 - 교정 이력 통합 조회의 기준")
    glass_class: Optional[str] = Field(default=None, max_length=20, description="등급 (Class A/B)")
    brand: Optional[str] = Field(default=None, max_length=100, description="제조사")
    received_date: Optional[UTCDateTime] = Field(default=None, description="입고일")
    location: Optional[str] = Field(default=None, max_length=255, description="보관 위치")
    responsible: Optional[str] = Field(default=None, max_length=100, description="담당자")
    notes: Optional[str] = Field(default=None, description="비고")


class Glassware(GlasswareBase):
    id: Optional[int] = Field(default=None, description="초자 고유 ID")


# =============================================================================
# 3. 교정 이력 (ledger) 레코드 모델
# =============================================================================
class CalibrationHistoryBase(SQLModel):
    equipment_id: int = Field(description="소유 장비 ID")
    calibration_date: UTCDateTime = Field(description="교정일")
    result: str = Field(max_length=100, description="교정 결과")
    certificate_number: Optional[str] = Field(default=None, max_length=100, description="성적서 번호")
    calibrated_by: Optional[str] = Field(default=None, max_length=100, description="교정 기관/담당자")
    method: Optional[str] = Field(default=None, description="교정 방법")
    remarks: Optional[str] = Field(default=None, description="비고")
    next_calibration_date: Optional[UTCDateTime] = Field(default=None, description="다음 교정 예정일")


class CalibrationHistory(CalibrationHistoryBase):
    id: Optional[int] = Field(default=None)
