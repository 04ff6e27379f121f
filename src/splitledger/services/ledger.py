from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List

from splitledger.errors import InvalidInput
from splitledger.logging import get_logger
from splitledger.models import Balance, Expense, ParticipantId, Settlement
from splitledger.services.balances import calculate_balances
from splitledger.services.settlement import apply_settlement, simplify_debts

log = get_logger(__name__)


def group_balances(expenses: Iterable[Expense], settlements: Iterable[Settlement] = ()) -> List[Balance]:
    balances = calculate_balances(expenses)
    for settlement in settlements:
        balances = apply_settlement(balances, settlement)
    return balances


def suggested_settlements(expenses: Iterable[Expense], settlements: Iterable[Settlement] = ()) -> List[Settlement]:
    return simplify_debts(group_balances(expenses, settlements))


def record_settlement(from_participant: ParticipantId, to_participant: ParticipantId, amount_cents: int) -> Settlement:
    if amount_cents <= 0:
        raise InvalidInput("Settlement amount must be positive")
    if from_participant == to_participant:
        raise InvalidInput("Cannot settle with yourself")
    return Settlement(from_participant=from_participant, to_participant=to_participant, amount=amount_cents)


@dataclass(frozen=True, slots=True)
class GroupLedger:
    """Expenses and recorded payments of one group.

    The ledger is owned by the caller and never shared implicitly; adding
    to it returns a new ledger. Callers that keep one per group are
    responsible for serialising updates to it.
    """

    group_id: str
    expenses: tuple[Expense, ...] = ()
    settlements: tuple[Settlement, ...] = ()

    def with_expense(self, expense: Expense) -> GroupLedger:
        log.info("ledger.expense", group_id=self.group_id, payer=expense.payer, amount_cents=expense.amount)
        return replace(self, expenses=self.expenses + (expense,))

    def with_settlement(self, settlement: Settlement) -> GroupLedger:
        log.info(
            "ledger.settlement",
            group_id=self.group_id,
            from_participant=settlement.from_participant,
            to_participant=settlement.to_participant,
            amount_cents=settlement.amount,
        )
        return replace(self, settlements=self.settlements + (settlement,))

    def balances(self) -> List[Balance]:
        balances = group_balances(self.expenses, self.settlements)
        log.debug("ledger.balances", group_id=self.group_id, participants=len(balances))
        return balances

    def suggested_settlements(self) -> List[Settlement]:
        return simplify_debts(self.balances())

    def is_settled(self) -> bool:
        return all(balance.net_cents == 0 for balance in self.balances())
