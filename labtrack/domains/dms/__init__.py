# labtrack/domains/dms/__init__.py

"""
'dms' 도메인 패키지입니다. 품질 문서(Document)와 MSDS(물질안전보건자료)를 관리합니다.
"""
