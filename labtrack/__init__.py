# labtrack/__init__.py

"""
LabTrack FastAPI 애플리케이션의 메인 패키지입니다.

실험실 관리 시스템(공구/초자 교정, 시약, 문서, 교육, MSDS, 업무, QA 시료)의
REST API를 제공합니다. 진입점은 main.py이며, 공통 설정과 저장소는 core,
업무별 모듈은 domains 서브패키지에 위치합니다.
"""

APP_NAME = "LabTrack FastAPI API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Laboratory management (calibration, inventory, QA workflow) API backend."
__all__ = []
