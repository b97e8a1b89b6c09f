"""
ComplianceRecord — запись об одобрении пользователя по активу
"""

from pydantic import BaseModel, Field

from .units import Uint64


class ComplianceRecord(BaseModel):
    """
    Одобрение (asset_id, user) compliance authority.

    Запись хранится и доступна для запросов, но transfer/mint/buy её
    не проверяют. Отзыва нет: запись только перезаписывается.
    """

    approved: bool = Field(..., description="Флаг одобрения")
    timestamp: Uint64 = Field(..., description="Block height момента одобрения")

    model_config = {"frozen": True}
