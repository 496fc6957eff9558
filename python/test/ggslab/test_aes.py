import pandas as pd
import pytest

from ggslab.aes import Column, Expr, Literal, Negate, aes, col, is_mapped, label_of


class TestAes:
    def test_drops_missing_position(self):
        assert aes() == {}
        assert aes(y=col("i")) == {"y": Column("i")}

    def test_wraps_constants(self):
        assert aes(x=col("u"), color="red", size=2) == {"x": Column("u"), "color": Literal("red"), "size": Literal(2)}

    def test_negation(self):
        assert -col(".width") == Negate(Column(".width"))
        assert -col(".width") != col(".width")


class TestEvaluate:
    df = pd.DataFrame({".width": [0.5, 0.95]})

    def test_column(self):
        assert list(col(".width").evaluate(self.df)) == [0.5, 0.95]

    def test_negated_column(self):
        assert list((-col(".width")).evaluate(self.df)) == [-0.5, -0.95]

    def test_literal(self):
        assert Literal("red").evaluate(self.df) == "red"

    def test_missing_column(self):
        with pytest.raises(ValueError, match="Column '.lower' not found"):
            col(".lower").evaluate(self.df)

    def test_evaluate_is_abstract(self):
        assert Expr.evaluate.__isabstractmethod__


class TestLabels:
    def test_label_of(self):
        assert label_of(col(".width")) == ".width"
        assert label_of(-col(".width")) == "-.width"
        assert label_of(Literal(3)) == "3"

    def test_is_mapped(self):
        assert is_mapped(col("x"))
        assert is_mapped(-col("x"))
        assert not is_mapped(Literal(1))
        assert not is_mapped(-Literal(1))
