"""Unit tests for utility functions (cppinit.utils).

Tests cover:
- to_identifier / to_upper_snake (various inputs)
- Rich output helpers (print_header, print_summary_table, etc.)
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from cppinit.utils import (
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
    to_identifier,
    to_upper_snake,
)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


class TestToIdentifier:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("mylib", "mylib"),
            ("my-lib", "my_lib"),
            ("my.lib", "my_lib"),
            ("3d", "_3d"),
            ("", "_"),
        ],
    )
    def test_conversion(self, name, expected):
        assert to_identifier(name) == expected


class TestToUpperSnake:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("mylib", "MYLIB"),
            ("myProject", "MY_PROJECT"),
            ("my-project", "MY_PROJECT"),
            ("2fast", "_2FAST"),
        ],
    )
    def test_conversion(self, name, expected):
        assert to_upper_snake(name) == expected


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_success(self):
        with patch("cppinit.utils.console") as mock_console:
            print_success("done")
        mock_console.print.assert_called_once()
        assert "done" in mock_console.print.call_args[0][0]

    @pytest.mark.unit
    def test_print_error_goes_to_stderr_console(self):
        with patch("cppinit.utils.err_console") as mock_err, patch(
            "cppinit.utils.console"
        ) as mock_out:
            print_error("broken")
        mock_err.print.assert_called_once()
        assert "broken" in mock_err.print.call_args[0][0]
        mock_out.print.assert_not_called()

    @pytest.mark.unit
    def test_print_warning_goes_to_stderr_console(self):
        with patch("cppinit.utils.err_console") as mock_err:
            print_warning("careful")
        assert "careful" in mock_err.print.call_args[0][0]

    @pytest.mark.unit
    def test_print_summary_table(self):
        with patch("cppinit.utils.console") as mock_console:
            print_summary_table({"Name": "myapp", "Files": "12"}, title="Result")
        table = mock_console.print.call_args_list[0][0][0]
        assert table.title == "Result"
        assert table.row_count == 2

    @pytest.mark.unit
    def test_print_header_with_subtitle(self):
        with patch("cppinit.utils.console") as mock_console:
            print_header("Title", "sub")
        printed = [str(c[0][0]) for c in mock_console.print.call_args_list if c[0]]
        assert any("sub" in text for text in printed)
