# labtrack/core/config.py

from typing import List, Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "LabTrack FastAPI API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Laboratory management API (equipment calibration, inventory, QA workflow)"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and error messages")
    LOG_LEVEL: str = Field("INFO", description="Root logging level (DEBUG, INFO, WARNING, ...)")
    CORS_ORIGINS: List[str] = Field(["*"], description="Allowed CORS origins")

    # --- 저장소 설정 ---
    # global: 모든 엔티티 종류가 하나의 ID 시퀀스를 공유, per_kind: 종류별 독립 시퀀스
    ID_SEQUENCE_SCOPE: Literal["global", "per_kind"] = Field("global", description="Identifier sequence scope of the in-memory store")

    # --- 상태 판정 임계값 ---
    CALIBRATION_WARNING_DAYS: int = Field(30, description="Days before next calibration that count as due-soon")
    EXPIRY_WARNING_DAYS: int = Field(30, description="Days before expiry that count as near-expiry")
    QA_DUE_WARNING_DAYS: int = Field(3, description="Days before a QA due date that count as due-soon")

    # --- 교정 이력 ---
    CALIBRATION_HISTORY_RETENTION_YEARS: int = Field(5, description="Rolling retention window of calibration history queries")

    # --- QA 시료 워크플로 ---
    QA_ENFORCE_STATUS_TRANSITIONS: bool = Field(True, description="Reject QA sample status changes outside the transition table")


settings = Settings()
