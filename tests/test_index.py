from simplesearch.index import build_index, tokenize
from simplesearch.records import load_records


def test_tokenize_lowercases_and_splits_on_whitespace():
    assert tokenize("  The\tCAT  sat\n") == ["the", "cat", "sat"]
    assert tokenize("   ") == []


def test_scenario_postings(index):
    assert index.postings("the") == (0, 1)
    assert index.postings("cat") == (0, 2)
    assert index.postings("played") == (2,)


def test_absent_token_has_empty_postings(index):
    assert "zebra" not in index
    assert index.postings("zebra") == ()


def test_keys_are_exactly_the_tokens_present():
    lines = ["Hello world", "", "hello   THERE", "   "]
    idx = build_index(load_records(lines))
    expected = {t for line in lines for t in tokenize(line)}
    assert set(idx.tokens()) == expected
    assert "" not in idx
    assert all(idx.postings(t) for t in idx.tokens())


def test_postings_point_at_records_containing_token():
    store = load_records(["a b c", "B d", "c c e", "F"])
    idx = build_index(store)
    for token in idx.tokens():
        for pos in idx.postings(token):
            assert token in tokenize(store[pos].text)


def test_repeated_token_keeps_duplicate_positions():
    idx = build_index(load_records(["go go gadget", "go"]))
    assert idx.postings("go") == (0, 0, 1)


def test_empty_store_gives_empty_index():
    idx = build_index(load_records([]))
    assert len(idx) == 0
