from __future__ import annotations

from typing import List

import pytest

from ld_mode.buffer import BufferDocument, BufferValidationError
from ld_mode.config import IndentStyle, set_indent_unit
from ld_mode.indent import IndentRule, compute_indent, indent_decision, reindent_lines

SCENARIO = ["SECTIONS {", ".text : {", "*(.text)", "}", "}"]
SCENARIO_INDENTED = [
    "SECTIONS {",
    "    .text : {",
    "        *(.text)",
    "    }",
    "}",
]

STARTUP_SCRIPT = """\
ENTRY(Reset_Handler)
MEMORY
{
FLASH (rx) : ORIGIN = 0x08000000, LENGTH = 512K
RAM (rwx) : ORIGIN = 0x20000000, LENGTH = 128K
}

SECTIONS
{
/* vector table goes first */
.isr_vector :
{
KEEP(*(.isr_vector))
} > FLASH
.text : { *(.text) } > FLASH
/DISCARD/ : { *(.comment) }
}
"""


def make_document(*lines: str) -> BufferDocument:
    return BufferDocument.from_lines(lines)


def settle(lines: List[str], unit: int = 4) -> List[int]:
    """Type ``lines`` one at a time, indenting each before the next arrives."""

    typed: List[str] = []
    columns: List[int] = []
    for raw in lines:
        typed.append(raw)
        row = len(typed) - 1
        column = compute_indent(make_document(*typed), row, unit)
        typed[row] = " " * max(column, 0) + raw.strip()
        columns.append(column)
    return columns


def test_first_line_is_always_column_zero() -> None:
    for line in ("}", "    {", "\t.text : {", "", "/* } */"):
        assert compute_indent(make_document(line, "next"), 0, 4) == 0

    decision = indent_decision(make_document("    }"), 0, 4)
    assert decision.rule is IndentRule.FIRST_LINE


def test_sections_block_indents_while_typing() -> None:
    assert settle(SCENARIO) == [0, 4, 8, 4, 0]


def test_reindent_lines_settles_sections_block() -> None:
    assert reindent_lines(SCENARIO, 4) == SCENARIO_INDENTED


def test_closing_brace_line_dedents_from_previous_line() -> None:
    document = make_document("SECTIONS {", "        *(.text)", "    }  ")

    decision = indent_decision(document, 2, 4)

    assert decision == indent_decision(document, 2, 4)
    assert decision.column == 4
    assert decision.rule is IndentRule.CLOSE_BRACE
    assert decision.anchor_row == 1


def test_line_after_closed_block_drops_one_unit() -> None:
    document = make_document("SECTIONS {", "    }", "    _end = .;", "}")

    after_close = indent_decision(document, 2, 4)
    assert after_close.column == 0
    assert after_close.rule is IndentRule.SCAN_CLOSE

    closing = indent_decision(document, 3, 4)
    assert closing.column == 0
    assert closing.rule is IndentRule.CLOSE_BRACE


def test_opening_brace_on_its_own_line_aligns_with_previous_line() -> None:
    document = make_document("SECTIONS {", "    .data :", "{", "*(.data)")

    assert compute_indent(document, 2, 4) == 4
    assert indent_decision(document, 2, 4).rule is IndentRule.OPEN_BRACE


def test_line_after_opening_brace_gains_one_unit() -> None:
    document = make_document("SECTIONS {", "    .data : {", "*(.data)")

    decision = indent_decision(document, 2, 4)

    assert decision.column == 8
    assert decision.rule is IndentRule.SCAN_OPEN
    assert decision.anchor_row == 1


def test_allman_braces() -> None:
    lines = ["SECTIONS", "{", ".text :", "{", "*(.text)", "}", "}"]

    assert reindent_lines(lines, 4) == [
        "SECTIONS",
        "{",
        "    .text :",
        "    {",
        "        *(.text)",
        "    }",
        "}",
    ]


def test_scan_reaching_the_top_gives_zero() -> None:
    document = make_document("ENTRY(_start)", "OUTPUT_ARCH(arm)", "    INPUT(crt0.o)")

    decision = indent_decision(document, 2, 4)

    assert decision.column == 0
    assert decision.rule is IndentRule.SCAN_EXHAUSTED
    assert decision.anchor_row is None


def test_unmatched_closing_brace_goes_negative() -> None:
    document = make_document("ENTRY(_start)", "}")

    assert compute_indent(document, 1, 4) == -4
    assert compute_indent(document, 1, 2) == -2


def test_negative_columns_are_written_without_indentation() -> None:
    assert reindent_lines(["a = 1;", "}", "b = 2;"], 4) == ["a = 1;", "}", "b = 2;"]


def test_comment_lines_are_skipped_while_scanning() -> None:
    document = make_document(
        "SECTIONS {",
        "    /* } closing brace in prose */",
        "*(.text)",
    )

    decision = indent_decision(document, 2, 4)

    assert decision.column == 4
    assert decision.anchor_row == 0


def test_lines_inside_multiline_comment_are_skipped() -> None:
    document = make_document(
        "MEMORY {",
        "/*",
        "  { not a real block",
        "*/",
        "FLASH : ORIGIN = 0x0, LENGTH = 256K",
    )

    decision = indent_decision(document, 4, 4)

    assert decision.column == 4
    assert decision.anchor_row == 0


def test_comment_probe_can_be_replaced() -> None:
    document = make_document(
        "SECTIONS {",
        "    /* } closing brace in prose */",
        "*(.text)",
    )
    probed = []

    def never_comment(doc: BufferDocument, position: tuple[int, int]) -> bool:
        probed.append(position)
        return False

    assert compute_indent(document, 2, 4, comment_probe=never_comment) == 0
    assert probed == [(1, 4)]


def test_faithful_style_counts_brace_inside_comment_on_current_line() -> None:
    document = make_document(
        "SECTIONS {",
        "    /*",
        "    } this brace is prose",
        "    */",
    )

    faithful = indent_decision(document, 2, 4)
    aware = indent_decision(document, 2, 4, style=IndentStyle.COMMENT_AWARE)

    assert (faithful.column, faithful.rule) == (0, IndentRule.CLOSE_BRACE)
    assert (aware.column, aware.rule) == (4, IndentRule.SCAN_OPEN)


def test_faithful_style_counts_brace_in_trailing_comment() -> None:
    document = make_document(
        "SECTIONS {",
        "    . = ALIGN(4); /* } */",
        "_end = .;",
    )

    assert compute_indent(document, 2, 4) == 0
    assert compute_indent(document, 2, 4, style="comment-aware") == 4


def test_tabs_count_as_single_columns() -> None:
    document = make_document("\t.text : {", "*(.text)")

    assert compute_indent(document, 1, 4) == 5


def test_indent_unit_is_read_from_config_on_each_call() -> None:
    document = make_document(*SCENARIO_INDENTED)

    set_indent_unit(2)
    assert compute_indent(document, 2) == 6

    set_indent_unit(8)
    assert compute_indent(document, 2) == 12


def test_compute_indent_leaves_document_untouched() -> None:
    document = make_document(*SCENARIO)
    before = (document.snapshot(), document.version)

    for row in range(document.line_count):
        compute_indent(document, row, 4)

    assert (document.snapshot(), document.version) == before


def test_row_out_of_range_raises() -> None:
    document = make_document("SECTIONS {")

    with pytest.raises(BufferValidationError):
        compute_indent(document, 1, 4)
    with pytest.raises(BufferValidationError):
        compute_indent(document, -1, 4)


def test_reindent_lines_is_idempotent() -> None:
    once = reindent_lines(STARTUP_SCRIPT.split("\n"), 4)
    twice = reindent_lines(once, 4)

    assert twice == once
    assert once[3] == "    FLASH (rx) : ORIGIN = 0x08000000, LENGTH = 512K"
    assert once[6] == ""
    assert once[12] == "        KEEP(*(.isr_vector))"


def test_reindent_lines_respects_range() -> None:
    lines = ["SECTIONS {", ".text : {", "*(.text)", "}", "}"]

    result = reindent_lines(lines, 4, start=1, end=3)

    assert result == ["SECTIONS {", "    .text : {", "        *(.text)", "}", "}"]
    assert lines == SCENARIO
