"""Tests for tree-style logging."""

import logging

from richtext import split, text
from richtext.logging_config import GlobalIndent, IndentLogger


class TestGlobalIndent:
    """Tests for GlobalIndent state."""

    def test_no_indent_at_top_level(self) -> None:
        """Level 0 has no prefix."""
        assert GlobalIndent.get_indent() == ""

    def test_branch_inside_block(self) -> None:
        """An open block shows a branch."""
        GlobalIndent.increase()

        assert GlobalIndent.get_indent() == "├──"

    def test_nested_blocks(self) -> None:
        """Nested blocks show a pipe for each open parent."""
        GlobalIndent.increase()
        GlobalIndent.increase()

        assert GlobalIndent.get_indent() == "│   ├──"

    def test_double_line(self) -> None:
        """Emphasized blocks use double-line characters."""
        GlobalIndent.increase(double_line=True)

        assert GlobalIndent.get_indent() == "║──"

    def test_decrease_never_goes_negative(self) -> None:
        """Decreasing at level 0 is a no-op."""
        GlobalIndent.decrease()

        assert GlobalIndent.level() == 0


class TestIndentLogger:
    """Tests for IndentLogger."""

    def test_indent_block_prefixes_messages(self, caplog) -> None:
        """Messages inside a block are indented."""
        log = IndentLogger(logging.getLogger("richtext.test"))
        caplog.set_level(logging.DEBUG, logger="richtext.test")

        with log.indent_block("start"):
            log.debug("inside")
        log.debug("after")

        assert [r.getMessage() for r in caplog.records] == ["start", "├──inside", "after"]

    def test_indent_block_restores_level_on_error(self) -> None:
        """The level is restored when the block raises."""
        log = IndentLogger(logging.getLogger("richtext.test"))

        try:
            with log.indent_block():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        assert GlobalIndent.level() == 0


class TestSplitLogging:
    """Tests for log output of the split engine."""

    def test_split_logs_debug_records(self, caplog) -> None:
        """Splitting logs the pattern and the number of parts."""
        caplog.set_level(logging.DEBUG, logger="richtext")

        split(text("a/b", children=[text("c")]), "/")

        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "Splitting on '/'"
        assert messages[-1] == "Split produced 2 part(s)"
        assert any("text 'c'" in m for m in messages)

    def test_split_leaves_indent_clean(self) -> None:
        """Indentation is back at level 0 after a split."""
        split(text("a/b", children=[text("c/d")]), "/")

        assert GlobalIndent.level() == 0

    def test_split_is_silent_without_debug(self, caplog) -> None:
        """No records are emitted when DEBUG is disabled."""
        caplog.set_level(logging.INFO, logger="richtext")

        split(text("a/b", children=[text("c")]), "/")

        assert caplog.records == []


class TestDebugEnabled:
    """Tests for IndentLogger.is_debug_enabled."""

    def test_reflects_logger_level(self) -> None:
        """is_debug_enabled follows the level of the wrapped logger."""
        base = logging.getLogger("richtext.test.level")
        log = IndentLogger(base)

        base.setLevel(logging.INFO)
        assert log.is_debug_enabled() is False

        base.setLevel(logging.DEBUG)
        assert log.is_debug_enabled() is True
