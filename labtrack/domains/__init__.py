# labtrack/domains/__init__.py

"""
업무 도메인별 서브패키지(eqp, inv, dms, trn, tsk, lims, rpt)를 담는 패키지입니다.
"""
