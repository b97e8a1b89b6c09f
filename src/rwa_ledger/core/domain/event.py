"""
LedgerEvent — запись append-only журнала событий

Каждая успешная мутация добавляет событие. События откатанного вызова
в журнал не попадают (журнал хранится в том же StateStore).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Тип события ledger"""

    ASSET_REGISTERED = "asset_registered"
    ASSET_MINTED = "asset_minted"
    TRANSFER = "transfer"
    LISTING_CREATED = "listing_created"
    PURCHASE = "purchase"
    AUTHORITY_CHANGED = "authority_changed"
    USER_APPROVED = "user_approved"


class LedgerEvent(BaseModel):
    """Событие ledger."""

    sequence: int = Field(..., ge=0, description="Порядковый номер в журнале")
    event: EventType = Field(..., description="Тип события")
    block_height: int = Field(..., ge=0, description="Высота блока вызова")
    sender: str = Field(..., min_length=1, description="Principal, инициировавший вызов")
    payload: dict[str, Any] = Field(default_factory=dict, description="Ключевые поля события")

    model_config = {"frozen": True}
