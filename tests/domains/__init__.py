# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_eqp_n.py`: 공구/초자와 교정 이력
- `test_inv_n.py`: 시약
- `test_dms_n.py`: 품질 문서와 MSDS
- `test_trn_n.py`: 교육 기록
- `test_tsk_n.py`: 업무와 하위 업무 승인
- `test_lims_n.py`: QA 시료 접수와 QA 시험 결과
- `test_rpt_n.py`: 대시보드 통계
"""

__all__ = []
