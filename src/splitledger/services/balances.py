from __future__ import annotations

from typing import Iterable, Mapping

from splitledger.models import Balance, Expense, ParticipantId


def calculate_balances(expenses: Iterable[Expense]) -> list[Balance]:
    """Fold expenses into net balances, one per participant seen.

    The payer is credited the full amount and every share holder is debited
    their share, so the resulting balances always sum to zero.
    """
    balances: dict[ParticipantId, int] = {}
    for expense in expenses:
        balances[expense.payer] = balances.get(expense.payer, 0) + expense.amount
        for participant, share in expense.shares.items():
            balances[participant] = balances.get(participant, 0) - share
    return balances_from_map(balances)


def balances_to_map(balances: Iterable[Balance]) -> dict[ParticipantId, int]:
    return {balance.participant: balance.net_cents for balance in balances}


def balances_from_map(mapping: Mapping[ParticipantId, int]) -> list[Balance]:
    return [Balance(participant=participant, net_cents=net) for participant, net in mapping.items()]
