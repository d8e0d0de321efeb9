"""Базовая модель ответа Youtu"""
from pydantic import BaseModel, ConfigDict, Field, model_validator

from youtu.exceptions import ApplicationError


class WireModel(BaseModel):
    """Модель JSON структуры: лишние ключи игнорируются, отсутствующие получают нулевые значения"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # null означает нулевое значение поля
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class YoutuResponse(WireModel):
    """Общие поля каждого ответа"""

    error_code: int = Field(0, alias="errorcode")
    error_msg: str = Field("", alias="errormsg")

    @property
    def ok(self) -> bool:
        return self.error_code == 0

    def raise_for_error(self, operation: str = None) -> None:
        """Выбросить ApplicationError, если errorcode ненулевой"""
        if self.error_code != 0:
            raise ApplicationError(self.error_code, self.error_msg, operation)
