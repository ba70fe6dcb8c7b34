# receipt_points/rules/engine.py
from typing import Sequence
from ..models import Receipt
from .ruleset import DEFAULT_RULES, Rule

def score_receipt(receipt: Receipt, rules: Sequence[Rule] = DEFAULT_RULES) -> int:
    """Sum of every rule's contribution; rules are independent and never short-circuit."""
    return sum(rule(receipt) for rule in rules)
