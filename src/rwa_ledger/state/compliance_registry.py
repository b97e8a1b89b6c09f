"""ComplianceRegistry — compliance authority и одобрения (asset_id, user).

Одобрения только записываются и читаются: transfer/mint/buy их не проверяют.
Отзыва одобрения нет.
"""

import logging
from typing import Optional

from rwa_ledger.core.config import LedgerConfig
from rwa_ledger.core.domain.compliance import ComplianceRecord
from rwa_ledger.core.domain.event import EventType
from rwa_ledger.core.errors import ErrorCode, LedgerError
from rwa_ledger.gatekeeper.access_control import (
    require_compliance_authority,
    require_contract_owner,
)
from rwa_ledger.gatekeeper.validator import validate_principal
from rwa_ledger.host.host import CallContext
from rwa_ledger.host.store import StateStore
from rwa_ledger.state.asset_registry import GLOBALS_TABLE, AssetRegistry
from rwa_ledger.state.event_log import EventLog


logger = logging.getLogger(__name__)

AUTHORITY_KEY = "compliance_authority"


class ComplianceRegistry:
    """Реестр compliance одобрений.

    compliance_authority инициализируется владельцем контракта (deployer).
    """

    TABLE = "compliance"

    def __init__(
        self,
        store: StateStore,
        assets: AssetRegistry,
        events: EventLog,
        contract_owner: str,
        config: Optional[LedgerConfig] = None,
    ):
        self.config = config or LedgerConfig()
        self.contract_owner = contract_owner
        self._records = store.table(self.TABLE)
        self._globals = store.table(GLOBALS_TABLE)
        self._globals.setdefault(AUTHORITY_KEY, contract_owner)
        self._assets = assets
        self._events = events

    @property
    def authority(self) -> str:
        return self._globals[AUTHORITY_KEY]

    def get_record(self, asset_id: int, user: str) -> Optional[ComplianceRecord]:
        return self._records.get((asset_id, user))

    def is_approved(self, asset_id: int, user: str) -> bool:
        record = self.get_record(asset_id, user)
        return record is not None and record.approved

    def set_authority(self, ctx: CallContext, new_authority: str) -> bool:
        """Смена compliance authority.

        Raises:
            LedgerError: NOT_AUTHORIZED (не владелец контракта),
                INVALID_AUTHORITY (пустой, совпадает с текущим или с контрактом)
        """
        validate_principal(new_authority, ErrorCode.INVALID_AUTHORITY)
        require_contract_owner(ctx, self.contract_owner)

        previous = self.authority
        if new_authority == previous:
            raise LedgerError(ErrorCode.INVALID_AUTHORITY, f"{new_authority} is already the authority")
        if new_authority == self.config.contract_principal:
            raise LedgerError(ErrorCode.INVALID_AUTHORITY, "authority cannot be the contract itself")

        self._globals[AUTHORITY_KEY] = new_authority

        self._events.append(
            ctx,
            EventType.AUTHORITY_CHANGED,
            previous=previous,
            authority=new_authority,
        )
        logger.info("Compliance authority changed: %s -> %s", previous, new_authority)
        return True

    def approve_user(self, ctx: CallContext, asset_id: int, user: str) -> bool:
        """Одобрение user по активу на текущей высоте блока.

        Raises:
            LedgerError: ASSET_NOT_FOUND, NOT_AUTHORIZED, INVALID_PARAMS
        """
        self._assets.require(asset_id)
        validate_principal(user)
        if user == self.config.contract_principal:
            raise LedgerError(ErrorCode.INVALID_PARAMS, "cannot approve the contract itself")
        if user == self.contract_owner:
            raise LedgerError(ErrorCode.INVALID_PARAMS, "cannot approve the contract owner")

        require_compliance_authority(ctx, self.authority)

        self._records[(asset_id, user)] = ComplianceRecord(
            approved=True, timestamp=ctx.block_height
        )

        self._events.append(ctx, EventType.USER_APPROVED, asset_id=asset_id, user=user)
        logger.info("User %s approved for asset %d at height %d", user, asset_id, ctx.block_height)
        return True
