"""Shared-expense splitting and debt settlement engine."""

from splitledger.errors import InvalidInput, SplitError, ValidationError
from splitledger.models import Balance, Expense, ParticipantId, Settlement, ShareMap, SplitMethod
from splitledger.services.balances import calculate_balances
from splitledger.services.ledger import GroupLedger, group_balances, record_settlement, suggested_settlements
from splitledger.services.settlement import apply_settlement, simplify_debts
from splitledger.services.split import (
    build_expense,
    split_amount,
    split_by_exact_amounts,
    split_by_percentage,
    split_equally,
)

__all__ = [
    "Balance",
    "Expense",
    "GroupLedger",
    "InvalidInput",
    "ParticipantId",
    "Settlement",
    "ShareMap",
    "SplitError",
    "SplitMethod",
    "ValidationError",
    "apply_settlement",
    "build_expense",
    "calculate_balances",
    "group_balances",
    "record_settlement",
    "simplify_debts",
    "split_amount",
    "split_by_exact_amounts",
    "split_by_percentage",
    "split_equally",
    "suggested_settlements",
]
