# labtrack/domains/rpt/schemas.py

from pydantic import BaseModel, Field as PydanticField


class DashboardStats(BaseModel):
    overdue_count: int = PydanticField(description="교정 기한 경과 장비 + 유효기간 경과 시약 수")
    expired_chemicals: int = PydanticField(description="유효기간 경과 시약 수")
    calibration_due: int = PydanticField(description="30일 이내 교정 예정 장비 수")
    pending_tasks: int = PydanticField(description="대기 중 업무 수")
    in_progress_tasks: int = PydanticField(description="진행 중 업무 수")
    completed_training: int = PydanticField(description="합격 처리된 교육 기록 수")
