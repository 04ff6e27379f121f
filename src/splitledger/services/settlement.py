from __future__ import annotations

from typing import Iterable, List

from splitledger.logging import get_logger
from splitledger.models import Balance, Settlement
from splitledger.services.balances import balances_from_map, balances_to_map

log = get_logger(__name__)


def simplify_debts(balances: Iterable[Balance]) -> List[Settlement]:
    """Greedily pair the largest creditor with the largest debtor.

    Each round zeroes at least one balance, so a set of ``n`` balances that
    sums to zero is cleared with at most ``n - 1`` settlements. The result is
    not guaranteed to be the global minimum.
    """
    working = [[balance.participant, balance.net_cents] for balance in balances]
    settlements: list[Settlement] = []
    if not working:
        return settlements

    while True:
        # max()/min() return the first of equal entries, keeping ties stable
        creditor = max(working, key=lambda entry: entry[1])
        debtor = min(working, key=lambda entry: entry[1])

        if creditor[1] == 0 and debtor[1] == 0:
            break

        amount = min(creditor[1], -debtor[1])
        if amount <= 0:
            break

        settlements.append(Settlement(from_participant=debtor[0], to_participant=creditor[0], amount=amount))
        creditor[1] -= amount
        debtor[1] += amount

    log.debug("settle.plan", participants=len(working), settlements=len(settlements))
    return settlements


def apply_settlement(balances: Iterable[Balance], settlement: Settlement) -> List[Balance]:
    """Return new balances reflecting a payment that actually happened."""
    result = balances_to_map(balances)
    result[settlement.from_participant] = result.get(settlement.from_participant, 0) + settlement.amount
    result[settlement.to_participant] = result.get(settlement.to_participant, 0) - settlement.amount
    return balances_from_map(result)
