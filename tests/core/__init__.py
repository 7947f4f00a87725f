# tests/core/__init__.py

"""저장소(InMemoryStore)와 CRUDBase 단위 테스트."""
