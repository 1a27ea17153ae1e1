import pytest

from hector.core import Document, HighlightType, Position, Row, SearchDirection
from hector.core import document as document_module
from hector.core.document import split_lines

FORWARD = SearchDirection.FORWARD
BACKWARD = SearchDirection.BACKWARD


def make_document(*lines: str) -> Document:
    document = Document()
    for y, line in enumerate(lines):
        if not line:
            document.insert(Position(0, y), "\n")
        for x, ch in enumerate(line):
            document.insert(Position(x, y), ch)
    return document


def open_document(tmp_path, *lines: str) -> Document:
    path = tmp_path / "notes.txt"
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return Document.open(str(path))


def texts(document: Document) -> list:
    return [document.row(index).text for index in range(len(document))]


def test_new_document_is_clean_and_empty() -> None:
    document = Document()

    assert document.is_empty()
    assert document.length() == 0
    assert not document.is_dirty()
    assert document.file_name is None
    assert document.file_type() == "No filetype"


def test_row_lookup() -> None:
    document = make_document("a", "b")

    assert document.row(1) == Row("b")
    assert document.row(2) is None
    assert document.row(-1) is None


def test_insert_newline_splits_row() -> None:
    document = make_document("abc", "def")

    document.insert(Position(1, 0), "\n")

    assert texts(document) == ["a", "bc", "def"]
    assert document.is_dirty()


def test_insert_newline_past_last_row_appends_empty_row() -> None:
    document = make_document("abc")

    document.insert(Position(0, 1), "\n")

    assert texts(document) == ["abc", ""]


def test_insert_newline_at_row_edges() -> None:
    document = make_document("abc")

    document.insert(Position(0, 0), "\n")
    document.insert(Position(3, 1), "\n")

    assert texts(document) == ["", "abc", ""]


def test_insert_character_into_row() -> None:
    document = make_document("ac")

    document.insert(Position(1, 0), "b")
    document.insert(Position(50, 0), "d")

    assert texts(document) == ["abcd"]
    assert document.row(0).length() == 4


def test_insert_on_new_row() -> None:
    document = Document()

    document.insert(Position(0, 0), "x")

    assert texts(document) == ["x"]
    assert document.is_dirty()


def test_insert_beyond_row_count_is_ignored(tmp_path) -> None:
    document = open_document(tmp_path, "abc")

    document.insert(Position(0, 2), "x")
    document.insert(Position(0, 5), "\n")

    assert texts(document) == ["abc"]
    assert not document.is_dirty()


def test_delete_at_end_of_row_joins_next() -> None:
    document = make_document("a", "bc", "def")

    document.delete(Position(1, 0))

    assert texts(document) == ["abc", "def"]
    assert document.row(0).length() == 3
    assert document.is_dirty()


def test_delete_at_end_of_last_row_is_noop() -> None:
    document = make_document("a", "bc")

    document.delete(Position(2, 1))

    assert texts(document) == ["a", "bc"]


def test_delete_character() -> None:
    document = make_document("abc", "def")

    document.delete(Position(1, 1))

    assert texts(document) == ["abc", "df"]


def test_delete_beyond_rows_is_ignored(tmp_path) -> None:
    document = open_document(tmp_path, "abc")

    document.delete(Position(0, 1))

    assert texts(document) == ["abc"]
    assert not document.is_dirty()


def test_find_forward_in_row() -> None:
    document = make_document("abcabc")

    assert document.find("bc", Position(0, 0), FORWARD) == Position(1, 0)
    assert document.find("bc", Position(2, 0), FORWARD) == Position(4, 0)


def test_find_forward_continues_on_later_rows() -> None:
    document = make_document("abc", "xyz", "abc")

    assert document.find("ab", Position(1, 0), FORWARD) == Position(0, 2)
    assert document.find("yz", Position(3, 0), FORWARD) == Position(1, 1)


def test_find_backward_continues_on_earlier_rows() -> None:
    document = make_document("abc abc", "xyz", "abc")

    assert document.find("abc", Position(0, 2), BACKWARD) == Position(4, 0)
    assert document.find("abc", Position(3, 2), BACKWARD) == Position(0, 2)
    assert document.find("abc", Position(4, 0), BACKWARD) == Position(0, 0)


def test_find_does_not_wrap() -> None:
    document = make_document("abc", "xyz")

    assert document.find("abc", Position(1, 0), FORWARD) is None
    assert document.find("xyz", Position(0, 1), BACKWARD) is None
    assert document.find("missing", Position(0, 0), FORWARD) is None


def test_find_from_outside_document() -> None:
    document = make_document("abc")

    assert document.find("abc", Position(0, 1), FORWARD) is None
    assert Document().find("abc", Position(0, 0), BACKWARD) is None


def test_highlight_marks_search_term() -> None:
    document = make_document("foo bar", "bar")

    document.highlight("bar")

    assert document.row(0).highlighting[4:] == (HighlightType.MATCH,) * 3
    assert document.row(1).highlighting == (HighlightType.MATCH,) * 3


def test_save_and_reopen(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    document = make_document("hello", "world")
    document.file_name = str(path)
    assert document.is_dirty()

    document.save()

    assert not document.is_dirty()
    assert path.read_bytes() == b"hello\nworld\n"

    reopened = Document.open(str(path))
    assert texts(reopened) == ["hello", "world"]
    assert not reopened.is_dirty()


def test_save_without_file_name_is_noop() -> None:
    document = make_document("hello")
    document.insert(Position(0, 0), "x")

    document.save()

    assert document.is_dirty()


def test_edit_save_cycle(tmp_path) -> None:
    path = tmp_path / "main.rs"
    path.write_text("fn main() {}\r\n", encoding="utf-8")

    document = Document.open(str(path))
    assert document.file_type() == "Rust"
    assert texts(document) == ["fn main() {}"]
    assert document.row(0).highlighting[:2] == (HighlightType.PRIMARY_KEYWORDS,) * 2

    document.insert(Position(12, 0), "\n")
    document.insert(Position(0, 1), "1")
    assert document.is_dirty()

    document.save()
    assert not document.is_dirty()
    assert path.read_bytes() == b"fn main() {}\n1\n"


def test_open_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        Document.open(str(tmp_path / "missing.txt"))


def test_open_invalid_utf8(tmp_path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00abc")

    with pytest.raises(UnicodeDecodeError):
        Document.open(str(path))


def test_open_grapheme_content(tmp_path) -> None:
    path = tmp_path / "emoji.txt"
    path.write_text("a\U0001F44D\U0001F3FDb\n", encoding="utf-8")

    document = Document.open(str(path))
    document.delete(Position(1, 0))

    assert texts(document) == ["ab"]


@pytest.mark.parametrize(
    "content,expected",
    [
        ("", []),
        ("\n", [""]),
        ("a", ["a"]),
        ("a\nb\n", ["a", "b"]),
        ("a\r\nb", ["a", "b"]),
        ("a\n\nb", ["a", "", "b"]),
    ],
)
def test_split_lines(content: str, expected: list) -> None:
    assert split_lines(content) == expected


def test_rows_are_only_reachable_through_lookup() -> None:
    document = make_document("abc")

    assert not hasattr(document, "rows")
    assert not hasattr(document, "dirty")
    assert document.row(0).text == "abc"


def test_failed_save_keeps_document_dirty(tmp_path) -> None:
    document = make_document("hello")
    document.file_name = str(tmp_path / "missing-dir" / "notes.txt")

    with pytest.raises(FileNotFoundError):
        document.save()

    assert document.is_dirty()
    assert texts(document) == ["hello"]


def test_open_permission_denied(tmp_path, monkeypatch) -> None:
    path = tmp_path / "secret.txt"
    path.write_text("hidden\n", encoding="utf-8")

    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(document_module, "open", deny, raising=False)

    with pytest.raises(PermissionError):
        Document.open(str(path))
