# labtrack/domains/lims/models.py

"""
'lims' 도메인 (QA 시료 접수, QA 시험 결과)의 저장 레코드 모델을 정의하는 모듈입니다.

시료 목록(samples)과 시험 항목 목록(test_items)은 독립 식별자가 없는 값 객체로,
JSON 배열 형태로 상위 레코드에 포함됩니다. 구조 검증은 schemas 계층에서 수행합니다.
"""

from typing import Any, Dict, List, Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from labtrack.core.types import UTCDateTime


class QaSampleStatus(str, Enum):
    RECEIVED = "received"
    TESTING = "testing"
    COMPLETED = "completed"
    DELIVERED = "delivered"


class DeliveryMethod(str, Enum):
    PICKUP = "pickup"
    ADDRESS_REPORT = "address_report"
    ADDRESS_INVOICE = "address_invoice"
    OTHER = "other"


class StorageCondition(str, Enum):
    ROOM_TEMP = "room_temp"
    CHILLED = "chilled"
    FROZEN = "frozen"


class PostTesting(str, Enum):
    RETURN = "return"
    DISPOSE = "dispose"


class SampleCondition(str, Enum):
    NORMAL = "normal"
    ABNORMAL = "abnormal"


class QaTestResultStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# =============================================================================
# 1. qa_samples 레코드 모델
# =============================================================================
class QaSampleBase(SQLModel):
    request_no: str = Field(max_length=50, description="의뢰 번호 (고유)")
    received_time: str = Field(max_length=10, description="접수 시각 (HH:MM)")
    received_date: UTCDateTime = Field(description="접수일")
    due_date: UTCDateTime = Field(description="결과 회신 예정일")
    quotation_no: Optional[str] = Field(default=None, max_length=50, description="견적 번호")
    contact_person: str = Field(max_length=100, description="의뢰인 담당자")
    phone: str = Field(max_length=50, description="연락처")
    email: str = Field(max_length=255, description="이메일")
    company_name: str = Field(max_length=255, description="의뢰 회사명")
    address: Optional[str] = Field(default=None, description="주소")
    delivery_method: DeliveryMethod = Field(description="결과 전달 방법")
    samples: List[Dict[str, Any]] = Field(default_factory=list, description="시료 목록 (JSON)")
    storage: StorageCondition = Field(description="시료 보관 조건")
    post_testing: PostTesting = Field(description="시험 후 시료 처리")
    condition: SampleCondition = Field(description="접수 시 시료 상태")
    status: QaSampleStatus = Field(default=QaSampleStatus.RECEIVED, description="진행 상태")


class QaSample(QaSampleBase):
    id: Optional[int] = Field(default=None)


# =============================================================================
# 2. qa_test_results 레코드 모델
# =============================================================================
class QaTestResultBase(SQLModel):
    sample_no: str = Field(max_length=50, description="시료 번호 (QA 시료의 samples[].sample_no, FK 아님)")
    request_no: str = Field(max_length=50, description="의뢰 번호 (FK 아님)")
    product: str = Field(max_length=255, description="제품명")
    due_date: UTCDateTime = Field(description="결과 회신 예정일")
    test_items: List[Dict[str, Any]] = Field(default_factory=list, description="시험 항목 결과 목록 (JSON)")
    record_date: UTCDateTime = Field(description="기록일")
    status: QaTestResultStatus = Field(default=QaTestResultStatus.PENDING, description="진행 상태")
    notes: Optional[str] = Field(default=None, description="비고")


class QaTestResult(QaTestResultBase):
    id: Optional[int] = Field(default=None)
