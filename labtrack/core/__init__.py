# labtrack/core/__init__.py

"""
애플리케이션 전반에서 공유되는 핵심 모듈(설정, 저장소, CRUD 기반 클래스, 의존성)을 담는 패키지입니다.
"""
