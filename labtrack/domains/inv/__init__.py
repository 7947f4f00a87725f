# labtrack/domains/inv/__init__.py

"""
'inv' 도메인 패키지입니다. 시약(Chemical) 재고와 유효기간 상태를 관리합니다.
"""
