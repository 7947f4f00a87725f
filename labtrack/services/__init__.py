# labtrack/services/__init__.py
