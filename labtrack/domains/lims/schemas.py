# labtrack/domains/lims/schemas.py

"""
'lims' 도메인 (QA 시료 접수, QA 시험 결과)의 Pydantic 스키마를 정의하는 모듈입니다.

이 스키마들은 API 요청(Request) 및 응답(Response) 데이터의 유효성을 검사하고,
값 객체(시료, 시험 항목)의 구조를 정의합니다.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field as PydanticField, computed_field, model_validator

from labtrack.core.types import UTCDateTime
from labtrack.services.status_service import DueUrgency
from .models import (
    DeliveryMethod,
    PostTesting,
    QaSampleStatus,
    QaTestResultStatus,
    SampleCondition,
    StorageCondition,
)


# =============================================================================
# 1. 시료 / 시험 항목 값 객체
# =============================================================================
class ItemTest(BaseModel):
    test_name: str = PydanticField(min_length=1, max_length=255, description="시험 항목명")
    specification: Optional[str] = PydanticField(default=None, description="규격")
    unit: Optional[str] = PydanticField(default=None, max_length=50, description="단위")
    method: Optional[str] = PydanticField(default=None, description="시험 방법")


class SampleItem(BaseModel):
    sample_no: str = PydanticField(min_length=1, max_length=50, description="시료 번호")
    names: List[str] = PydanticField(min_length=1, description="시료 표시명 (하나 이상)")
    description: Optional[str] = PydanticField(default=None, description="시료 설명")
    analysis_request: Optional[str] = PydanticField(default=None, description="분석 요청 사항")
    unit: Optional[str] = PydanticField(default=None, max_length=50, description="수량 단위")
    item_tests: List[ItemTest] = PydanticField(default_factory=list, description="요청 시험 항목 목록")


# =============================================================================
# 2. QA 시료 접수 (QaSample) 스키마
# =============================================================================
class QaSampleBase(BaseModel):
    request_no: str = PydanticField(min_length=1, max_length=50, description="의뢰 번호")
    received_time: str = PydanticField(pattern=r"^\d{2}:\d{2}$", description="접수 시각 (HH:MM)")
    received_date: UTCDateTime = PydanticField(description="접수일")
    due_date: UTCDateTime = PydanticField(description="결과 회신 예정일")
    quotation_no: Optional[str] = PydanticField(default=None, max_length=50, description="견적 번호")
    contact_person: str = PydanticField(min_length=1, max_length=100, description="의뢰인 담당자")
    phone: str = PydanticField(min_length=1, max_length=50, description="연락처")
    email: str = PydanticField(min_length=3, max_length=255, description="이메일")
    company_name: str = PydanticField(min_length=1, max_length=255, description="의뢰 회사명")
    address: Optional[str] = PydanticField(default=None, description="주소")
    delivery_method: DeliveryMethod = PydanticField(description="결과 전달 방법")
    samples: List[SampleItem] = PydanticField(default_factory=list, description="시료 목록")
    storage: StorageCondition = PydanticField(description="시료 보관 조건")
    post_testing: PostTesting = PydanticField(description="시험 후 시료 처리")
    condition: SampleCondition = PydanticField(description="접수 시 시료 상태")


class QaSampleCreate(QaSampleBase):
    """신규 접수는 status 입력 없이 항상 received 상태로 시작합니다."""

    @model_validator(mode="after")
    def check_due_date(self) -> "QaSampleCreate":
        if self.due_date < self.received_date:
            raise ValueError("due_date must not be earlier than received_date")
        return self


class QaSampleUpdate(BaseModel):  # 업데이트는 모두 Optional, samples는 통째로 교체
    request_no: Optional[str] = PydanticField(None, min_length=1, max_length=50)
    received_time: Optional[str] = PydanticField(None, pattern=r"^\d{2}:\d{2}$")
    received_date: Optional[UTCDateTime] = None
    due_date: Optional[UTCDateTime] = None
    quotation_no: Optional[str] = PydanticField(None, max_length=50)
    contact_person: Optional[str] = PydanticField(None, min_length=1, max_length=100)
    phone: Optional[str] = PydanticField(None, min_length=1, max_length=50)
    email: Optional[str] = PydanticField(None, min_length=3, max_length=255)
    company_name: Optional[str] = PydanticField(None, min_length=1, max_length=255)
    address: Optional[str] = None
    delivery_method: Optional[DeliveryMethod] = None
    samples: Optional[List[SampleItem]] = None
    storage: Optional[StorageCondition] = None
    post_testing: Optional[PostTesting] = None
    condition: Optional[SampleCondition] = None
    status: Optional[QaSampleStatus] = PydanticField(None, description="진행 상태 (전이 규칙 적용)")


class QaSampleResponse(QaSampleBase):
    id: int = PydanticField(description="QA 시료 접수 고유 ID")
    status: QaSampleStatus = PydanticField(description="진행 상태")
    days_until_due: int = PydanticField(description="회신 예정일까지 남은 일수 (음수는 경과)")
    due_urgency: DueUrgency = PydanticField(description="납기 긴급도")
    due_color: str = PydanticField(description="화면 표시 색상 (red/orange/gray)")

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# 3. 시험 항목 결과 (test_type 기준 태그드 유니온)
# =============================================================================
class QaItemBase(BaseModel):
    record_date: Optional[UTCDateTime] = PydanticField(default=None, description="측정 기록일")


class PhItem(QaItemBase):
    test_type: Literal["pH"]
    ph1: Optional[float] = PydanticField(default=None, ge=0, le=14, description="1차 측정값")
    ph2: Optional[float] = PydanticField(default=None, ge=0, le=14, description="2차 측정값")

    @computed_field
    @property
    def ph_average(self) -> Optional[float]:
        """두 측정값의 평균 (소수 둘째 자리). 하나라도 없으면 None."""
        if self.ph1 is None or self.ph2 is None:
            return None
        return round((self.ph1 + self.ph2) / 2, 2)


class ActiveIngredientItem(QaItemBase):
    test_type: Literal["ActiveIngredient"]
    sample_name: Optional[str] = PydanticField(default=None, description="다중 표시명 시료 중 측정 대상 이름")
    active_ingredient1: Optional[float] = PydanticField(default=None, description="1차 측정값")
    active_ingredient2: Optional[float] = PydanticField(default=None, description="2차 측정값")
    active_ingredient3: Optional[float] = PydanticField(default=None, description="3차 측정값")

    @computed_field
    @property
    def active_ingredient_average(self) -> Optional[float]:
        """입력된 측정값만으로 계산한 평균 (소수 둘째 자리)."""
        readings = [
            v for v in (self.active_ingredient1, self.active_ingredient2, self.active_ingredient3)
            if v is not None
        ]
        if not readings:
            return None
        return round(sum(readings) / len(readings), 2)


class ResultItem(QaItemBase):
    test_type: Literal[
        "Appearance",
        "Density",
        "Reemulsification",
        "PersistenceFoaming",
        "AgingTest",
        "Moisture",
        "Viscosity",
        "FormulaTest",
    ]
    result: Optional[str] = PydanticField(default=None, description="시험 결과")


QaTestItem = Annotated[Union[PhItem, ActiveIngredientItem, ResultItem], PydanticField(discriminator="test_type")]


# =============================================================================
# 4. QA 시험 결과 (QaTestResult) 스키마
# =============================================================================
class QaTestResultBase(BaseModel):
    sample_no: str = PydanticField(min_length=1, max_length=50, description="시료 번호")
    request_no: str = PydanticField(min_length=1, max_length=50, description="의뢰 번호")
    product: str = PydanticField(min_length=1, max_length=255, description="제품명")
    due_date: UTCDateTime = PydanticField(description="결과 회신 예정일")
    test_items: List[QaTestItem] = PydanticField(min_length=1, description="시험 항목 결과 목록")
    record_date: UTCDateTime = PydanticField(description="기록일")
    status: QaTestResultStatus = PydanticField(default=QaTestResultStatus.PENDING, description="진행 상태")
    notes: Optional[str] = PydanticField(default=None, description="비고")


class QaTestResultCreate(QaTestResultBase):
    pass


class QaTestResultUpdate(BaseModel):  # 부분 수정 (PATCH)
    sample_no: Optional[str] = PydanticField(None, min_length=1, max_length=50)
    request_no: Optional[str] = PydanticField(None, min_length=1, max_length=50)
    product: Optional[str] = PydanticField(None, min_length=1, max_length=255)
    due_date: Optional[UTCDateTime] = None
    test_items: Optional[List[QaTestItem]] = PydanticField(None, min_length=1)
    record_date: Optional[UTCDateTime] = None
    status: Optional[QaTestResultStatus] = None
    notes: Optional[str] = None


class QaTestResultResponse(QaTestResultBase):
    id: int = PydanticField(description="QA 시험 결과 고유 ID")

    model_config = ConfigDict(from_attributes=True)
