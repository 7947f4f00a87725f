# labtrack/domains/tsk/__init__.py

"""
'tsk' 도메인 패키지입니다. 업무(Task)와 하위 업무(Subtask) 승인을 관리합니다.
"""
