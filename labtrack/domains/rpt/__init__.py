# labtrack/domains/rpt/__init__.py

"""
'rpt' 도메인 패키지입니다. 대시보드 집계(통계)를 제공합니다.
"""
