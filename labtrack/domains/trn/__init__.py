# labtrack/domains/trn/__init__.py

"""
'trn' 도메인 패키지입니다. 교육 훈련 기록을 관리합니다.
"""
