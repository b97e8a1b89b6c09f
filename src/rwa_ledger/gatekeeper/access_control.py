"""AccessControl — проверки идентичности вызывающего

Выполняются после Validator. Любое нарушение → NOT_AUTHORIZED.
"""

from rwa_ledger.core.domain.asset import Asset
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.host.host import CallContext


def require_contract_owner(ctx: CallContext, contract_owner: str) -> None:
    """Вызывающий — владелец контракта (deployer)."""
    if ctx.sender != contract_owner:
        raise LedgerError(ErrorCode.NOT_AUTHORIZED, f"{ctx.sender} is not the contract owner")


def require_compliance_authority(ctx: CallContext, authority: str) -> None:
    """Вызывающий — текущий compliance authority."""
    if ctx.sender != authority:
        raise LedgerError(ErrorCode.NOT_AUTHORIZED, f"{ctx.sender} is not the compliance authority")


def require_asset_owner(ctx: CallContext, asset: Asset) -> None:
    """Вызывающий — зарегистрированный владелец актива."""
    if ctx.sender != asset.owner:
        raise LedgerError(
            ErrorCode.NOT_AUTHORIZED,
            f"{ctx.sender} is not the owner of asset {asset.id}",
        )


def require_not_frozen(asset: Asset, code: ErrorCode = ErrorCode.NOT_AUTHORIZED) -> None:
    """Актив не заморожен.

    mint/transfer поднимают NOT_AUTHORIZED, buy — MARKETPLACE_FROZEN.
    """
    if asset.is_frozen:
        raise LedgerError(code, f"asset {asset.id} is frozen")
