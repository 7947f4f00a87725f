# tests/services/__init__.py

"""상태 판정 서비스 단위 테스트."""
