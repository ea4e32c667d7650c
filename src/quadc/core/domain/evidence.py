"""
Evidence — типизированная схема входного документа

Документ — JSON объект вида:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Зарезервированный ключ "keys" несёт метаданные выбора (k), все остальные
ключи — помеченные записи {base, value}. Вместо нетипизированного
динамического доступа документ превращается в EvidenceDocument.
"""

from typing import Any, Dict, Final, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

SELECTION_KEY: Final[str] = "keys"


# =============================================================================
# RECORDS
# =============================================================================


class EvidenceRecord(BaseModel):
    """
    Одна помеченная запись документа.

    base и value опциональны: неполные записи пропускаются загрузчиком.
    Проверка диапазона base выполняется загрузчиком (UnsupportedBase с ключом).
    """

    base: Optional[int] = Field(None, description="Основание (int или строка цифр)")
    value: Optional[str] = Field(None, description="Строка цифр")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("base", mode="before")
    @classmethod
    def coerce_base(cls, v: Any) -> Any:
        """Основание может прийти строкой: "16" → 16"""
        if isinstance(v, bool):
            raise ValueError("base must be an integer, not a boolean")
        if isinstance(v, str):
            stripped = v.strip()
            try:
                return int(stripped, 10)
            except ValueError:
                raise ValueError(f"base {v!r} is not an integer")
        return v

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Any:
        """
        Значение-число приводится к строке, как и в исходном формате.

        JSON Schema считает 1.0 целым, поэтому целый float тоже
        принимается: 1.0 → "1".
        """
        if isinstance(v, bool):
            raise ValueError("value must be a digit string, not a boolean")
        if isinstance(v, int):
            return str(v)
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError(f"value {v!r} is not an integer")
            return str(int(v))
        return v

    @property
    def is_complete(self) -> bool:
        return self.base is not None and self.value is not None


class SelectionMeta(BaseModel):
    """
    Метаданные выбора из ключа "keys".

    n — объявленное число записей (информационное), k — сколько первых
    записей использовать при включённом use_k.
    """

    n: Optional[int] = Field(None, ge=0, description="Объявленное число записей")
    k: Optional[int] = Field(None, ge=0, description="Число используемых записей")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("n", "k", mode="before")
    @classmethod
    def coerce_count(cls, v: Any) -> Any:
        if isinstance(v, str):
            return int(v.strip(), 10)
        return v


# =============================================================================
# DOCUMENT
# =============================================================================


class EvidenceDocument(BaseModel):
    """
    Входной документ: записи по ключам + опциональные метаданные выбора.

    Порядок записей — порядок ключей в исходном JSON; каноническое
    упорядочивание выполняет загрузчик.
    """

    records: Dict[str, EvidenceRecord] = Field(default_factory=dict)
    selection: Optional[SelectionMeta] = Field(None)

    model_config = {"frozen": True}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EvidenceDocument":
        """
        Построение документа из разобранного JSON объекта.

        Raises:
            pydantic.ValidationError: Если запись или метаданные некорректны
        """
        records = {key: rec for key, rec in data.items() if key != SELECTION_KEY}
        selection = data.get(SELECTION_KEY)
        return cls.model_validate({"records": records, "selection": selection})
