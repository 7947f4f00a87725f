# labtrack/domains/eqp/__init__.py

"""
'eqp' 도메인 패키지입니다. 교정 대상 장비(공구/측정기, 초자)와 장비별 교정 이력 장부를 관리합니다.

주요 서브모듈:
- `models.py`: 저장 레코드 모델 (SQLModel).
- `schemas.py`: 요청/응답 Pydantic 모델.
- `crud.py`: 장비 CRUD와 교정 이력 추가/조회 로직.
- `routers.py`: API 엔드포인트.
"""
