# labtrack/domains/trn/crud.py

"""
'trn' 도메인의 CRUD 로직을 담당하는 모듈입니다. 별도 비즈니스 규칙 없이 기본 CRUD를 사용합니다.
"""

from labtrack.core.crud_base import CRUDBase

from . import models as trn_models
from . import schemas as trn_schemas


class CRUDTraining(CRUDBase[trn_models.Training, trn_schemas.TrainingCreate, trn_schemas.TrainingUpdate]):
    def __init__(self):
        super().__init__(model=trn_models.Training, kind="training")


training = CRUDTraining()
