# labtrack/domains/lims/__init__.py

"""
'lims' 도메인 패키지입니다. QA 시료 접수(워크플로)와 QA 시험 결과를 관리합니다.

QA 시료는 received → testing → completed → delivered 순서로만 상태가 바뀌며,
시료(sample)와 시험 항목(item test)은 접수 건에 속한 값 객체로서 통째로 교체됩니다.
"""
