"""
Logging configuration for richtext

Includes IndentLogger for hierarchical tree-style visualization of the
recursive split.
"""

import io
import logging
import sys
import threading
from contextlib import contextmanager


class GlobalIndent:
    """Indentation and tree state for hierarchical logging.

    State is kept per thread, so concurrent splits do not garble each
    other's indentation.
    """

    _tree_chars_single = {
        "pipe": "│",
        "branch": "├──",
        "leaf": "└──",
        "space": " " * 3,
    }
    _tree_chars_double = {
        "pipe": "║",
        "branch": "║──",
        "leaf": "╚══",
        "space": " " * 3,
    }
    _local = threading.local()

    @classmethod
    def _state(cls) -> threading.local:
        state = cls._local
        if not hasattr(state, "level"):
            state.level = 0
            state.active_branches = set()
            state.double_lines = set()
        return state

    @classmethod
    def level(cls) -> int:
        """Current indentation level"""
        return cls._state().level

    @classmethod
    def increase(cls, double_line: bool = False) -> None:
        """Increase indentation level"""
        state = cls._state()
        state.level += 1
        state.active_branches.add(state.level - 1)
        if double_line:
            state.double_lines.add(state.level - 1)

    @classmethod
    def decrease(cls) -> None:
        """Decrease indentation level"""
        state = cls._state()
        if state.level > 0:
            # No longer active - will show end corner
            state.active_branches.discard(state.level - 1)
            state.double_lines.discard(state.level - 1)
            state.level -= 1

    @classmethod
    def reset(cls) -> None:
        """Reset indentation state (useful for tests)"""
        state = cls._state()
        state.level = 0
        state.active_branches = set()
        state.double_lines = set()

    @classmethod
    def get_indent(cls) -> str:
        """Get current indentation string with tree characters"""
        state = cls._state()
        if state.level == 0:
            return ""

        parts = []
        # For all levels except current, show pipe only if level is still active
        for i in range(state.level - 1):
            if i in state.active_branches:
                chars = (
                    cls._tree_chars_double
                    if i in state.double_lines
                    else cls._tree_chars_single
                )
                parts.append(f"{chars['pipe']}   ")
            else:
                parts.append("    ")

        # For current level, use leaf if not active (end of block)
        chars = (
            cls._tree_chars_double
            if (state.level - 1) in state.double_lines
            else cls._tree_chars_single
        )
        is_end = (state.level - 1) not in state.active_branches
        parts.append(chars["leaf"] if is_end else chars["branch"])
        return "".join(parts)


class IndentLogger:
    """Logger wrapper that handles indentation using per-thread state"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        """Log debug message with indentation"""
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def is_debug_enabled(self) -> bool:
        """Check whether debug records would be emitted"""
        return self._logger.isEnabledFor(logging.DEBUG)

    @property
    def indent(self) -> str:
        """Get current indentation string"""
        return GlobalIndent.get_indent()

    @contextmanager
    def indent_block(
        self, initial_message: str | None = None, double_line: bool = False
    ):
        """
        Context manager for handling indentation blocks

        Args:
            initial_message: Optional message to log at block start
            double_line: Use double-line characters for emphasis
        """
        if initial_message:
            self.debug(initial_message)
        GlobalIndent.increase(double_line)
        try:
            yield
        finally:
            GlobalIndent.decrease()


def setup_logging(level=logging.INFO):
    """
    Configure logging for richtext

    Args:
        level: Logging level (default: INFO)

    Returns:
        IndentLogger: Configured logger with indentation support
    """
    # Create logger
    base_logger = logging.getLogger("richtext")
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # Console handler with UTF-8 encoding so the tree characters survive cp1252 consoles
    stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)

    # Simple format for tree-style output
    formatter = logging.Formatter("%(levelname)8s %(message)s")
    handler.setFormatter(formatter)

    base_logger.addHandler(handler)

    return IndentLogger(base_logger)


# Default logger with indentation support
logger = IndentLogger(logging.getLogger("richtext"))
