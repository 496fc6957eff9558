from typing import Optional

import pytest

from ggslab.typecheck import typecheck


@typecheck
def describe(name: str, count: int, note: Optional[str] = None, extra=None):
    return (name, count, note, extra)


class TestTypecheck:
    def test_accepts_matching_arguments(self):
        assert describe("a", 1) == ("a", 1, None, None)
        assert describe("a", count=1, note="n") == ("a", 1, "n", None)

    def test_rejects_positional(self):
        with pytest.raises(TypeError, match="Argument 'count'"):
            describe("a", "1")

    def test_rejects_keyword(self):
        with pytest.raises(TypeError, match="Argument 'name'"):
            describe(count=1, name=1)

    def test_optional(self):
        assert describe("a", 1, None)[2] is None
        with pytest.raises(TypeError, match="Argument 'note'"):
            describe("a", 1, note=3)

    def test_unannotated_arguments_are_not_checked(self):
        assert describe("a", 1, extra=object())[0] == "a"

    def test_preserves_name(self):
        assert describe.__name__ == "describe"
