# tests/test_services.py
import pytest

from receipt_points.models import ReceiptFields, ReceiptItem
from receipt_points.rules.ruleset import build_rules
from receipt_points.services.receipts import ReceiptNotFound, get_points, submit_receipt

def test_submit_and_score(repository):
    fields = ReceiptFields(retailer="Target", purchase_date="2022-01-01", purchase_time="13:01",
                           items=(ReceiptItem("Mountain Dew 12PK", "6.49"),), total="6.49")
    rid = submit_receipt(repository, fields)
    assert get_points(repository, rid) == 12

def test_each_id_scores_its_own_receipt(repository):
    # total 0.01 and blank date/time leave only the retailer length
    ids = {k: submit_receipt(repository, ReceiptFields(retailer="A" * k, total="0.01")) for k in range(1, 11)}
    assert len(set(ids.values())) == 10
    for k, rid in ids.items():
        assert get_points(repository, rid) == k

def test_unknown_id_is_not_found(repository):
    with pytest.raises(ReceiptNotFound) as exc:
        get_points(repository, "never-submitted")
    assert exc.value.receipt_id == "never-submitted"

def test_custom_rules(repository):
    rid = submit_receipt(repository, ReceiptFields(retailer="A & B", total="0.01"))
    assert get_points(repository, rid) == 5
    assert get_points(repository, rid, build_rules("alphanumeric")) == 2
