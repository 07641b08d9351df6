import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from symbolic_expression import (
    Constant, Variable, Sum, Product, MissingVariableError, parse, evaluate, evaluate_batch
)
from symbolic_expression.expression_tree.core import NodeType, evaluate_binary_op


def test_evaluate_constant():
    assert evaluate(Constant(2.5), {}) == 2.5


def test_evaluate_variable():
    assert evaluate(Variable("x"), {"x": 4.0}) == 4.0


def test_evaluate_sum_and_product():
    assert evaluate(parse("x + 3"), {"x": 2.0}) == 5.0
    assert evaluate(parse("x * y"), {"x": 2.0, "y": 3.0}) == 6.0
    assert evaluate(parse("(x + 3) * 2"), {"x": 1.0}) == 8.0
    assert evaluate(parse("x + 3 * 2"), {"x": 1.0}) == 7.0


def test_evaluate_returns_float():
    result = evaluate(parse("x * 2"), {"x": 3})
    assert isinstance(result, float)
    assert result == 6.0


def test_missing_variable():
    with pytest.raises(MissingVariableError) as excinfo:
        evaluate(Variable("x"), {})
    assert excinfo.value.name == "x"
    assert "x" in str(excinfo.value)


def test_missing_variable_is_value_error():
    with pytest.raises(ValueError):
        evaluate(parse("x + y"), {"x": 1.0})


def test_first_missing_variable_is_reported():
    with pytest.raises(MissingVariableError) as excinfo:
        evaluate(parse("a * 2 + b"), {})
    assert excinfo.value.name == "a"


def test_extra_bindings_are_ignored():
    assert evaluate(parse("x"), {"x": 1.0, "y": 2.0}) == 1.0


def test_method_form():
    assert parse("2 * 3 + 1").evaluate() == 7.0
    with pytest.raises(MissingVariableError):
        parse("q").evaluate()


def test_evaluate_batch_matches_scalar_evaluation():
    rng = np.random.RandomState(42)
    x = rng.uniform(0, 10, 50)
    y = rng.uniform(-5, 5, 50)
    expression = parse("x * x + 3 * y * (x + 1) + 2.5")
    result = evaluate_batch(expression, {"x": x, "y": y})
    assert result.shape == (50,)
    assert result.dtype == np.float64
    expected = [evaluate(expression, {"x": xi, "y": yi}) for xi, yi in zip(x, y)]
    np.testing.assert_allclose(result, expected, rtol=1e-12)


def test_evaluate_batch_broadcasts_scalars():
    result = evaluate_batch(parse("x * k"), {"x": [1.0, 2.0, 3.0], "k": 2})
    np.testing.assert_array_equal(result, [2.0, 4.0, 6.0])


def test_evaluate_batch_constant_expression():
    np.testing.assert_array_equal(evaluate_batch(parse("2 * 3"), {}), [6.0])
    np.testing.assert_array_equal(evaluate_batch(parse("2 + z * 0"), {"z": [1, 2]}), [2.0, 2.0])


def test_evaluate_batch_inconsistent_lengths():
    with pytest.raises(ValueError):
        evaluate_batch(parse("x + y"), {"x": [1.0, 2.0], "y": [1.0, 2.0, 3.0]})


def test_evaluate_batch_rejects_two_dimensional_columns():
    with pytest.raises(ValueError):
        evaluate_batch(parse("x"), {"x": np.ones((2, 2))})


def test_evaluate_batch_missing_column():
    with pytest.raises(MissingVariableError) as excinfo:
        evaluate_batch(parse("x + y"), {"x": [1.0]})
    assert excinfo.value.name == "y"


def test_evaluate_batch_does_not_alias_input():
    column = np.array([1.0, 2.0])
    result = evaluate_batch(Variable("x"), {"x": column})
    result[0] = 99.0
    assert column[0] == 1.0


def test_batch_kernel_rejects_leaf_node_types():
    ones = np.ones(3)
    np.testing.assert_array_equal(evaluate_binary_op(ones, ones, int(NodeType.SUM)), [2.0, 2.0, 2.0])
    for node_type in (NodeType.CONSTANT, NodeType.VARIABLE):
        with pytest.raises(ValueError):
            evaluate_binary_op(ones, ones, int(node_type))


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
