import pytest

from splitledger.errors import InvalidInput, ValidationError
from splitledger.models import Expense, SplitMethod
from splitledger.services.balances import calculate_balances


def test_expense_rejects_shares_not_summing_to_amount():
    with pytest.raises(ValidationError):
        Expense(amount=1000, payer="a", participants=("b",), shares={"b": 1})


@pytest.mark.parametrize("amount", [0, -100])
def test_expense_rejects_non_positive_amount(amount):
    with pytest.raises(InvalidInput):
        Expense(amount=amount, payer="a", participants=("b",), shares={"b": amount})


def test_expense_rejects_shares_for_other_participants():
    with pytest.raises(InvalidInput):
        Expense(amount=1000, payer="a", participants=("b", "c"), shares={"b": 1000})
    with pytest.raises(InvalidInput):
        Expense(amount=1000, payer="a", participants=("b",), shares={"b": 500, "c": 500})


def test_expense_rejects_no_participants():
    with pytest.raises(InvalidInput):
        Expense(amount=1000, payer="a", participants=(), shares={})


def test_expense_shares_are_read_only():
    shares = {"a": 600, "b": 400}
    expense = Expense(amount=1000, payer="a", participants=["a", "b"], shares=shares, method="exact")

    shares["a"] = 0
    assert expense.shares == {"a": 600, "b": 400}
    with pytest.raises(TypeError):
        expense.shares["a"] = 1
    assert expense.participants == ("a", "b")
    assert expense.method is SplitMethod.EXACT


def test_expense_is_hashable():
    first = Expense(amount=1000, payer="a", participants=("a", "b"), shares={"a": 500, "b": 500})
    second = Expense(amount=1000, payer="a", participants=("a", "b"), shares={"a": 500, "b": 500})

    assert first == second
    assert len({first, second}) == 1


def test_balances_from_valid_expenses_sum_to_zero():
    expense = Expense(amount=1000, payer="a", participants=("b",), shares={"b": 1000})
    assert sum(b.net_cents for b in calculate_balances([expense])) == 0
