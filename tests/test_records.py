import pytest

from simplesearch.records import load_records, read_records


def test_positions_follow_input_order():
    store = load_records(["alpha", "Beta Gamma", ""])
    assert len(store) == 3
    assert [r.position for r in store] == [0, 1, 2]
    assert store[1].text == "Beta Gamma"
    assert list(store.positions()) == [0, 1, 2]


def test_line_terminators_are_stripped():
    store = load_records(["one\n", "two\r\n"])
    assert store.texts() == ["one", "two"]


def test_read_text_file_keeps_blank_lines(tmp_path):
    data = tmp_path / "names.txt"
    data.write_text("Dwight Joseph djo@gmail.com\n\nRita Jones\n", encoding="utf-8")
    store = read_records(data)
    assert store.texts() == ["Dwight Joseph djo@gmail.com", "", "Rita Jones"]


def test_read_html_file_uses_visible_text(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(
        "<html><head><style>p {color: red}</style><script>var x = 1;</script></head>"
        "<body><p>Cat and dog</p><p>Bird</p></body></html>",
        encoding="utf-8",
    )
    store = read_records(page)
    assert store.texts() == ["Cat and dog", "Bird"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_records(tmp_path / "nope.txt")


def test_only_line_breaks_split_records(tmp_path):
    data = tmp_path / "names.txt"
    data.write_text("Rita\x0cJones\nKatie\u2028Jacobs\nDwight Joseph\n", encoding="utf-8", newline="")
    store = read_records(data)
    assert len(store) == 3
    assert store.texts() == ["Rita\x0cJones", "Katie\u2028Jacobs", "Dwight Joseph"]


def test_crlf_and_cr_line_endings(tmp_path):
    data = tmp_path / "names.txt"
    data.write_bytes(b"one\r\ntwo\rthree\n")
    assert read_records(data).texts() == ["one", "two", "three"]
