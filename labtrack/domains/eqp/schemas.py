# labtrack/domains/eqp/schemas.py

"""
'eqp' 도메인 (공구/측정기, 초자, 교정 이력)의 Pydantic 스키마를 정의하는 모듈입니다.

응답 스키마의 calibration_status / days_until_calibration 필드는 저장 값이 아니라
조회 시점의 기준 시각으로 계산한 파생 값입니다.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field as PydanticField

from labtrack.core.types import UTCDateTime
from labtrack.services.status_service import CalibrationStatus
from .models import ToolStatus


# =============================================================================
# 0. 교정 필드 공통 스키마
# =============================================================================
class CalibrationFieldsSchema(BaseModel):
    last_calibration: Optional[UTCDateTime] = PydanticField(default=None, description="최근 교정일")
    next_calibration: Optional[UTCDateTime] = PydanticField(default=None, description="다음 교정 예정일")
    calibration_result: Optional[str] = PydanticField(default=None, max_length=100, description="교정 결과")
    calibration_certificate: Optional[str] = PydanticField(default=None, max_length=100, description="교정 성적서 번호")
    calibration_by: Optional[str] = PydanticField(default=None, max_length=100, description="교정 기관/담당자")
    calibration_method: Optional[str] = PydanticField(default=None, description="교정 방법")
    calibration_remarks: Optional[str] = PydanticField(default=None, description="교정 비고")


class CalibrationStatusMixin(BaseModel):
    calibration_status: CalibrationStatus = PydanticField(description="파생 교정 상태")
    days_until_calibration: Optional[int] = PydanticField(default=None, description="다음 교정까지 남은 일수 (음수는 경과)")


# =============================================================================
# 1. 공구/측정기 (Tool) 스키마
# =============================================================================
class ToolBase(CalibrationFieldsSchema):
    code: str = PydanticField(min_length=1, max_length=50, description="장비 코드")
    name: str = PydanticField(min_length=1, max_length=255, description="장비명")
    brand: Optional[str] = PydanticField(default=None, max_length=100, description="제조사")
    serial_number: Optional[str] = PydanticField(default=None, max_length=100, description="시리얼 번호")
    range: Optional[str] = PydanticField(default=None, max_length=100, description="측정 범위")
    location: Optional[str] = PydanticField(default=None, max_length=255, description="보관 위치")
    responsible: Optional[str] = PydanticField(default=None, max_length=100, description="담당자")
    notes: Optional[str] = PydanticField(default=None, description="비고")
    status: ToolStatus = PydanticField(default=ToolStatus.ACTIVE, description="사용 상태")
    repair_date: Optional[UTCDateTime] = PydanticField(default=None, description="수리 의뢰일")
    expected_return_date: Optional[UTCDateTime] = PydanticField(default=None, description="반환 예정일")
    repair_remarks: Optional[str] = PydanticField(default=None, description="수리 비고")


class ToolCreate(ToolBase):
    pass


class ToolUpdate(BaseModel):  # 업데이트는 모두 Optional
    code: Optional[str] = PydanticField(None, min_length=1, max_length=50, description="장비 코드")
    name: Optional[str] = PydanticField(None, min_length=1, max_length=255, description="장비명")
    brand: Optional[str] = PydanticField(None, max_length=100, description="제조사")
    serial_number: Optional[str] = PydanticField(None, max_length=100, description="시리얼 번호")
    range: Optional[str] = PydanticField(None, max_length=100, description="측정 범위")
    location: Optional[str] = PydanticField(None, max_length=255, description="보관 위치")
    last_calibration: Optional[UTCDateTime] = PydanticField(None, description="최근 교정일")
    next_calibration: Optional[UTCDateTime] = PydanticField(None, description="다음 교정 예정일")
    calibration_result: Optional[str] = PydanticField(None, max_length=100, description="교정 결과")
    calibration_certificate: Optional[str] = PydanticField(None, max_length=100, description="교정 성적서 번호")
    calibration_by: Optional[str] = PydanticField(None, max_length=100, description="교정 기관/담당자")
    calibration_method: Optional[str] = PydanticField(None, description="교정 방법")
    calibration_remarks: Optional[str] = PydanticField(None, description="교정 비고")
    responsible: Optional[str] = PydanticField(None, max_length=100, description="담당자")
    notes: Optional[str] = PydanticField(None, description="비고")
    status: Optional[ToolStatus] = PydanticField(None, description="사용 상태")
    repair_date: Optional[UTCDateTime] = PydanticField(None, description="수리 의뢰일")
    expected_return_date: Optional[UTCDateTime] = PydanticField(None, description="반환 예정일")
    repair_remarks: Optional[str] = PydanticField(None, description="수리 비고")


class ToolResponse(ToolBase, CalibrationStatusMixin):
    id: int = PydanticField(description="장비 고유 ID")

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# 2. 초자 (Glassware) 스키마
# =============================================================================
class GlasswareBase(CalibrationFieldsSchema):
    code: str = PydanticField(min_length=1, max_length=50, description="초자 코드")
    lot_number: Optional[str] = PydanticField(default=None, max_length=100, description="로트 번호")
    type: str = PydanticField(min_length=1, max_length=100, description="초자 종류")
    glass_class: Optional[str] = PydanticField(default=None, max_length=20, description="등급")
    brand: Optional[str] = PydanticField(default=None, max_length=100, description="제조사")
    received_date: Optional[UTCDateTime] = PydanticField(default=None, description="입고일")
    location: Optional[str] = PydanticField(default=None, max_length=255, description="보관 위치")
    responsible: Optional[str] = PydanticField(default=None, max_length=100, description="담당자")
    notes: Optional[str] = PydanticField(default=None, description="비고")


class GlasswareCreate(GlasswareBase):
    pass


class GlasswareUpdate(BaseModel):
    code: Optional[str] = PydanticField(None, min_length=1, max_length=50, description="초자 코드")
    lot_number: Optional[str] = PydanticField(None, max_length=100, description="로트 번호")
    type: Optional[str] = PydanticField(None, min_length=1, max_length=100, description="초자 종류")
    glass_class: Optional[str] = PydanticField(None, max_length=20, description="등급")
    brand: Optional[str] = PydanticField(None, max_length=100, description="제조사")
    received_date: Optional[UTCDateTime] = PydanticField(None, description="입고일")
    location: Optional[str] = PydanticField(None, max_length=255, description="보관 위치")
    last_calibration: Optional[UTCDateTime] = PydanticField(None, description="최근 교정일")
    next_calibration: Optional[UTCDateTime] = PydanticField(None, description="다음 교정 예정일")
    calibration_result: Optional[str] = PydanticField(None, max_length=100, description="교정 결과")
    calibration_certificate: Optional[str] = PydanticField(None, max_length=100, description="교정 성적서 번호")
    calibration_by: Optional[str] = PydanticField(None, max_length=100, description="교정 기관/담당자")
    calibration_method: Optional[str] = PydanticField(None, description="교정 방법")
    calibration_remarks: Optional[str] = PydanticField(None, description="교정 비고")
    responsible: Optional[str] = PydanticField(None, max_length=100, description="담당자")
    notes: Optional[str] = PydanticField(None, description="비고")


class GlasswareResponse(GlasswareBase, CalibrationStatusMixin):
    id: int = PydanticField(description="초자 고유 ID")

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# 3. 교정 이력 (Calibration History) 스키마
# =============================================================================
class CalibrationHistoryResponse(BaseModel):
    id: int
    equipment_id: int = PydanticField(description="소유 장비 ID")
    calibration_date: UTCDateTime = PydanticField(description="교정일")
    result: str = PydanticField(description="교정 결과")
    certificate_number: Optional[str] = None
    calibrated_by: Optional[str] = None
    method: Optional[str] = None
    remarks: Optional[str] = None
    next_calibration_date: Optional[UTCDateTime] = None

    model_config = ConfigDict(from_attributes=True)


class ConsolidatedCalibrationHistoryResponse(CalibrationHistoryResponse):
    """같은 이름(공구) 또는 종류(초자)의 장비 이력을 합친 응답. 출처 장비 식별 정보를 함께 담습니다."""
    equipment_code: str = PydanticField(description="출처 장비 코드")
    serial_number: Optional[str] = PydanticField(default=None, description="출처 공구 시리얼 번호")
    lot_number: Optional[str] = PydanticField(default=None, description="출처 초자 로트 번호")
