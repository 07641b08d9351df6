import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from symbolic_expression import Constant, Variable, NodeType, parse
from symbolic_expression.expression_tree import iter_postorder, fold_tree
from symbolic_expression.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, count_nodes, get_variables, get_constants,
    get_variable_usage_counts, find_nodes_by_type, find_nodes_by_operator,
    is_constant_expression
)


def test_traversal_orders():
    expression = parse("(a + b) * c")
    names = lambda nodes: [str(n) if n.node_type in (NodeType.CONSTANT, NodeType.VARIABLE)
                           else n.operator for n in nodes]
    assert names(get_all_nodes(expression)) == ["*", "+", "c", "a", "b"]
    assert names(get_all_nodes(expression, 'depth_first')) == ["*", "+", "a", "b", "c"]
    assert names(get_all_nodes(expression, 'postorder')) == ["a", "b", "+", "c", "*"]
    assert names(iter_postorder(expression)) == ["a", "b", "+", "c", "*"]
    with pytest.raises(ValueError):
        get_all_nodes(expression, 'sideways')


def test_fold_tree_receives_children_in_order():
    expression = parse("1 + 2 * 3")
    folded = fold_tree(expression, lambda node, parts: (
        str(node) if not parts else f"[{parts[0]} {node.operator} {parts[1]}]"))
    assert folded == "[1 + [2 * 3]]"


def test_depth_and_count():
    expression = parse("x * (y + 1) + 2")
    assert calculate_tree_depth(expression) == 4
    assert count_nodes(expression) == 7
    assert calculate_tree_depth(Variable("x")) == 1


def test_variables_and_constants():
    expression = parse("x * (y + 1) + 2 * x")
    assert get_variables(expression) == {"x", "y"}
    assert get_constants(expression) == (1.0, 2.0)
    assert get_variable_usage_counts(expression) == {"x": 2, "y": 1}


def test_find_nodes():
    expression = parse("a * b + c * (d + e)")
    assert len(find_nodes_by_operator(expression, "*")) == 2
    assert len(find_nodes_by_operator(expression, "+")) == 2
    assert len(find_nodes_by_type(expression, NodeType.VARIABLE)) == 5
    assert find_nodes_by_type(expression, NodeType.CONSTANT) == []


def test_is_constant_expression():
    assert is_constant_expression(parse("2 * (3 + 4)"))
    assert not is_constant_expression(parse("2 * x"))
    assert is_constant_expression(Constant(0))


def test_find_nodes_by_operator_matches_node_type_lookup():
    expression = parse("x * 2 + (y + 3) * x")
    assert find_nodes_by_operator(expression, "+") == find_nodes_by_type(expression, NodeType.SUM)
    assert find_nodes_by_operator(expression, "*") == find_nodes_by_type(expression, NodeType.PRODUCT)
    assert get_constants(expression) == (2.0, 3.0)
    assert get_variable_usage_counts(expression) == {"x": 2, "y": 1}


def test_find_nodes_by_operator_unknown_symbol():
    with pytest.raises(ValueError, match="Unknown operator"):
        find_nodes_by_operator(parse("a + b"), "-")


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
