from decimal import Decimal

from bext_ledger.ledger.tokenizer import FIELD_RULES, split_list, tokenize_line


def test_expense_line_basic_fields():
    raw = tokenize_line("- 12.50 @Bob #Food")
    assert raw.kind == "expense"
    assert raw.amount == Decimal("12.50")
    assert raw.budget == 0
    assert raw.persons == ["Bob"]
    assert raw.categories == ["Food"]
    assert raw.remarks == "Other"
    assert raw.method == "Other"
    assert raw.timestamp is None


def test_budget_line_goes_to_budget_not_amount():
    raw = tokenize_line("$200 #Food>Groceries")
    assert raw.kind == "budget"
    assert raw.budget == Decimal("200")
    assert raw.amount == 0


def test_unknown_leading_char_skips_amount():
    raw = tokenize_line("x 50 @Ann")
    assert raw.kind == "unknown"
    assert raw.amount == 0
    assert raw.budget == 0
    assert raw.persons == ["Ann"]


def test_sigils_in_any_order():
    a = tokenize_line("+ 100 @Ann;Bob #Salary ~Bank>Checking ?june pay :transfer [2024/06/01 09:00]")
    b = tokenize_line("+100 [2024/06/01 09:00] :transfer ?june pay ~Bank>Checking #Salary @Ann;Bob")
    for raw in (a, b):
        assert raw.kind == "income"
        assert raw.amount == Decimal("100")
        assert raw.persons == ["Ann", "Bob"]
        assert raw.categories == ["Salary"]
        assert raw.accounts == ["Bank>Checking"]
        assert raw.remarks == "june pay"
        assert raw.method == "transfer"
        assert raw.timestamp == "2024/06/01 09:00"


def test_span_stops_at_other_sigil():
    raw = tokenize_line("- 5 #Food;Drinks@Bob~Cash")
    assert raw.categories == ["Food", "Drinks"]
    assert raw.persons == ["Bob"]
    assert raw.accounts == ["Cash"]


def test_colon_inside_timestamp_is_not_method():
    raw = tokenize_line("- 5 #Food [6/3 13:15]")
    assert raw.method == "Other"
    assert raw.timestamp == "6/3 13:15"


def test_method_before_timestamp():
    raw = tokenize_line("- 5 :card [2024/06/03 13:15]")
    assert raw.method == "card"


def test_line_without_sigils_is_defaults():
    raw = tokenize_line("just some text")
    assert raw.kind == "unknown"
    assert raw.persons == []
    assert raw.accounts == []
    assert raw.categories == []
    assert raw.remarks == "Other"
    assert raw.method == "Other"
    assert raw.timestamp is None


def test_split_list_drops_empty_items():
    assert split_list(" Ann ; ;Bob; ") == ["Ann", "Bob"]
    assert split_list(None) == []


def test_duplicate_persons_pass_through():
    raw = tokenize_line("- 5 @Ann;Ann")
    assert raw.persons == ["Ann", "Ann"]


def test_field_rules_cover_all_sigils():
    assert {r.sigil for r in FIELD_RULES.values()} == {"@", "~", "#", "?", ":"}


def test_method_stops_at_following_sigil():
    assert tokenize_line("- 5 :cash#Food").method == "cash"
    assert tokenize_line("- 5 :cash~Wallet").method == "cash"
    assert tokenize_line("- 5 :cash[2024/06/01 09:00]").method == "cash"

    raw = tokenize_line("- 5 #Food:cash?note")
    assert raw.method == "cash"
    assert raw.categories == ["Food"]
    assert raw.remarks == "note"
