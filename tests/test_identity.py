from transmission_core.identity import IdentityTable


def test_first_seen_order():
    ids = IdentityTable()
    assert ids.get("x9") == 0
    assert ids.get("a1") == 1
    assert ids.get("x9") == 0
    assert ids.get("b") == 2
    assert len(ids) == 3


def test_ints_and_strings_share_keys():
    ids = IdentityTable()
    assert ids.get(5) == 0
    assert ids.get("5") == 0
    assert "5" in ids


def test_tables_are_independent():
    a = IdentityTable()
    b = IdentityTable()
    a.get("p")
    a.get("q")
    assert b.get("q") == 0
    assert dict(a.items()) == {"p": 0, "q": 1}
