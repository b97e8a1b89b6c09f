"""
Listing — Модель предложения на продажу

Ключ в Marketplace — (asset_id, seller). Не более одного активного listing на
пару: новый list() перезаписывает предыдущий.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .units import Uint64, checked_mul


class Listing(BaseModel):
    """
    Предложение продавца: quantity токенов по фиксированной price до expiry.

    Immutable модель (frozen=True). Частичная покупка создаёт новый экземпляр
    с уменьшенным quantity, price и expiry не меняются.
    """

    price: Uint64 = Field(..., ge=1, description="Цена за токен (native units)")
    quantity: Uint64 = Field(..., ge=1, description="Оставшееся количество")
    expiry: Uint64 = Field(..., description="Последний block height, когда listing активен")

    model_config = {"frozen": True}

    def is_expired(self, block_height: int) -> bool:
        """Listing истёк, если текущая высота строго больше expiry."""
        return block_height > self.expiry

    def total_cost(self, quantity: int) -> int:
        """
        Стоимость покупки quantity токенов.

        Raises:
            LedgerError(INVALID_PARAMS): При переполнении uint64
        """
        return checked_mul(self.price, quantity)

    def consume(self, quantity: int) -> Optional["Listing"]:
        """
        Остаток listing после покупки.

        Args:
            quantity: Купленное количество (1..self.quantity)

        Returns:
            None если listing выкуплен полностью, иначе копия с уменьшенным quantity
        """
        if quantity >= self.quantity:
            return None
        return self.model_copy(update={"quantity": self.quantity - quantity})
