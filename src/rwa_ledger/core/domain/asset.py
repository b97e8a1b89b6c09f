"""
Asset — Модель зарегистрированного токенизированного актива

Immutable Pydantic модель. id, owner, kind, metadata_uri не меняются после
регистрации; total_supply и is_frozen меняются только через новые экземпляры
(model_copy), которые AssetRegistry записывает обратно в таблицу.
"""

from pydantic import BaseModel, Field, field_validator

from .units import (
    KIND_MAX_LENGTH,
    KIND_MIN_LENGTH,
    METADATA_URI_MAX_LENGTH,
    METADATA_URI_MIN_LENGTH,
    Uint64,
)


class Asset(BaseModel):
    """
    Модель актива.

    Ключ в AssetRegistry — id. Начальный баланс создаётся вместе с активом,
    актив никогда не удаляется.
    """

    # Идентификация
    id: Uint64 = Field(..., ge=1, description="Последовательный id актива (с 1)")
    owner: str = Field(..., min_length=1, description="Principal владельца (может делать mint)")

    # Описание
    kind: str = Field(
        ...,
        min_length=KIND_MIN_LENGTH,
        max_length=KIND_MAX_LENGTH,
        description="Тип актива, ASCII (например, 'REAL_ESTATE')",
    )
    metadata_uri: str = Field(
        ...,
        min_length=METADATA_URI_MIN_LENGTH,
        max_length=METADATA_URI_MAX_LENGTH,
        description="URI метаданных (UTF-8)",
    )

    # Изменяемое состояние
    total_supply: Uint64 = Field(..., description="Суммарная эмиссия")
    is_frozen: bool = Field(default=False, description="Блокирует mint и transfer")

    model_config = {"frozen": True}

    @field_validator("kind")
    @classmethod
    def validate_kind_ascii(cls, v: str) -> str:
        """kind — только ASCII."""
        if not v.isascii():
            raise ValueError(f"kind {v!r} must be ASCII")
        return v

    def with_supply(self, total_supply: int) -> "Asset":
        """
        Новый экземпляр с обновлённым total_supply.

        Args:
            total_supply: Новая суммарная эмиссия

        Returns:
            Копия актива
        """
        return self.model_copy(update={"total_supply": total_supply})
