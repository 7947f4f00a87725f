# tests/__init__.py

"""
LabTrack API의 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트마다 새로 만드는 메모리 저장소, 고정 시계, AsyncClient 픽스처
- `core/`: 저장소와 공통 CRUD 단위 테스트
- `services/`: 상태 판정 함수 단위 테스트
- `domains/`: 도메인(eqp, inv, dms, trn, tsk, lims, rpt)별 API 통합 테스트
"""

__title__ = "LabTrack API Tests"
__version__ = "0.1.0"
__all__ = []
