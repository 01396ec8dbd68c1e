from __future__ import annotations

import pytest

from ld_mode.buffer import BufferDocument, BufferValidationError
from ld_mode.syntax import CommentScanner, comment_spans, is_inside_comment


def make_document(*lines: str) -> BufferDocument:
    return BufferDocument.from_lines(lines)


def test_comment_spans_include_delimiters() -> None:
    assert comment_spans("a /* b */ c /* d") == [(2, 9), (12, 16)]
    assert comment_spans("no comments here") == []


def test_shared_star_does_not_close_comment() -> None:
    assert comment_spans("/*/ x") == [(0, 5)]


def test_comments_do_not_nest() -> None:
    line = "/* outer /* inner */ tail */"

    assert comment_spans(line) == [(0, 20)]


def test_positions_across_multiline_comment() -> None:
    document = make_document("a /* b", "c", "d */ e", "f")

    assert not is_inside_comment(document, (0, 0))
    assert is_inside_comment(document, (0, 2))
    assert is_inside_comment(document, (1, 0))
    assert is_inside_comment(document, (2, 3))
    assert not is_inside_comment(document, (2, 4))
    assert not is_inside_comment(document, (3, 0))


def test_end_of_line_follows_comment_state() -> None:
    document = make_document("x /* open", "", "*/ y")

    assert is_inside_comment(document, (0, 9))
    assert is_inside_comment(document, (1, 0))
    assert not is_inside_comment(document, (2, 4))


def test_unterminated_comment_runs_to_end_of_document() -> None:
    document = make_document("SECTIONS {", "/* never closed", "}", "")

    assert is_inside_comment(document, (2, 0))
    assert is_inside_comment(document, (3, 0))


def test_position_out_of_range_raises() -> None:
    document = make_document("abc")

    with pytest.raises(BufferValidationError):
        is_inside_comment(document, (1, 0))
    with pytest.raises(BufferValidationError):
        is_inside_comment(document, (0, 4))


def test_scanner_checkpoints_follow_document_version() -> None:
    scanner = CommentScanner()
    document = make_document("/*", "x")
    assert scanner.is_inside_comment(document, (1, 0))

    edited = document.update_lines(0, 1, ["y"])

    assert edited.version == document.version + 1
    assert not scanner.is_inside_comment(edited, (1, 0))
    assert scanner.is_inside_comment(document, (1, 0))


def test_starts_inside_tracks_open_comments() -> None:
    scanner = CommentScanner()
    document = make_document("a", "/* b", "c */", "d")

    assert [scanner.starts_inside(document, row) for row in range(4)] == [
        False,
        False,
        True,
        False,
    ]
    assert scanner.line_spans(document, 2) == [(0, 4)]


def test_visible_text_blanks_comments() -> None:
    scanner = CommentScanner()
    line = "x = 1; /* { */ y"
    document = make_document(line)

    visible = scanner.visible_text(document, 0)

    assert visible == "x = 1;" + " " * 9 + "y"
    assert len(visible) == len(line)
    assert "{" not in visible
