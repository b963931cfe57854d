"""Tests for boxtable.options and boxtable.stringify."""

from __future__ import annotations

import pytest

from boxtable.errors import InvalidAlignmentError, TableOptionsError, UnknownColumnSizingError
from boxtable.options import TableOptions, resolve_options
from boxtable.stringify import display_value, inspect_value


# ---------------------------------------------------------------------------
# TableOptions
# ---------------------------------------------------------------------------


class TestTableOptions:
    def test_defaults(self) -> None:
        options = TableOptions()
        assert options.max_width == 80
        assert options.column_sizing == "stretch"
        assert options.horizontal_alignment == "middle"
        assert options.vertical_alignment == "middle"
        assert options.full_width is False
        assert options.throw_if_too_small is True
        assert options.index_column is False
        assert options.stringify is inspect_value

    def test_unknown_column_sizing(self) -> None:
        with pytest.raises(UnknownColumnSizingError) as excinfo:
            TableOptions(column_sizing="fit")  # type: ignore[arg-type]
        assert excinfo.value.column_sizing == "fit"

    @pytest.mark.parametrize(
        "kwargs",
        [{"horizontal_alignment": "center"}, {"vertical_alignment": "left"}],
    )
    def test_invalid_alignment(self, kwargs: dict) -> None:
        with pytest.raises(InvalidAlignmentError):
            TableOptions(**kwargs)

    def test_option_errors_are_value_errors(self) -> None:
        assert issubclass(TableOptionsError, ValueError)


class TestResolveOptions:
    """Merging keyword overrides into options."""

    def test_no_arguments_gives_defaults(self) -> None:
        assert resolve_options() == TableOptions()

    def test_overrides_win(self) -> None:
        base = TableOptions(max_width=40, full_width=True)
        resolved = resolve_options(base, max_width=60)
        assert resolved.max_width == 60
        assert resolved.full_width is True

    def test_base_not_modified(self) -> None:
        base = TableOptions(max_width=40)
        resolve_options(base, max_width=60)
        assert base.max_width == 40

    def test_none_overrides_ignored(self) -> None:
        base = TableOptions(max_width=40)
        assert resolve_options(base, max_width=None) is base

    def test_unknown_override(self) -> None:
        with pytest.raises(TypeError, match="maxWidth"):
            resolve_options(maxWidth=10)

    def test_overrides_are_validated(self) -> None:
        with pytest.raises(UnknownColumnSizingError):
            resolve_options(column_sizing="wide")


# ---------------------------------------------------------------------------
# Stringification
# ---------------------------------------------------------------------------


class TestInspectValue:
    def test_strings_are_quoted(self) -> None:
        assert inspect_value("John") == "'John'"

    def test_numbers(self) -> None:
        assert inspect_value(30) == "30"
        assert inspect_value(1.5) == "1.5"

    def test_nested_structures(self) -> None:
        assert inspect_value({"a": [1, 2]}) == "{'a': [1, 2]}"

    def test_none(self) -> None:
        assert inspect_value(None) == "None"

    def test_newlines_escaped_in_strings(self) -> None:
        assert inspect_value("a\nb") == "'a\\nb'"

    def test_multiline_repr_collapsed(self) -> None:
        class Multi:
            def __repr__(self) -> str:
                return "first\nsecond"

        assert inspect_value(Multi()) == "first second"


class TestDisplayValue:
    def test_strings_unquoted(self) -> None:
        assert display_value("John") == "John"

    def test_line_breaks_collapsed(self) -> None:
        assert display_value("a\r\nb\nc") == "a b c"

    def test_other_values_inspected(self) -> None:
        assert display_value([1, "x"]) == "[1, 'x']"
