import pytest

from dsakit.bst import BinarySearchTree
from dsakit.bst_algorithms import sorted_array_to_bst
from dsakit.codec import deserialize_bst, deserialize_tree, serialize_bst, serialize_tree
from dsakit.nodes import TreeNode, inorder_values, preorder_values


def shape(node):
    if node is None:
        return None
    return (node.val, shape(node.left), shape(node.right))


def bst_from(values):
    tree = BinarySearchTree()
    root = None
    for value in values:
        tree.insert(value)
    # rebuild the same shape by plain insertion for codec tests
    for value in values:
        root = _insert(root, value)
    return root, tree


def _insert(node, value):
    if node is None:
        return TreeNode(value)
    if node.val > value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return node


def test_serialize_bst_format():
    assert serialize_bst(None) == ""
    assert serialize_bst(TreeNode(7)) == "7,"


def test_serialize_bst_is_preorder():
    root = sorted_array_to_bst(list(range(10)))
    text = serialize_bst(root)
    assert text.endswith(",")
    assert [int(t) for t in text.split(",")[:-1]] == preorder_values(root)


@pytest.mark.parametrize(
    "values",
    [[5], [8, 3, 10, 1, 6, 14, 4, 7, 13], [1, 2, 3, 4], [4, 3, 2, 1], [-5, 0, -10, 7]],
)
def test_bst_round_trip(values):
    root, tree = bst_from(values)
    decoded = deserialize_bst(serialize_bst(root))
    assert shape(decoded) == shape(root)
    assert inorder_values(decoded) == tree.inorder()


def test_deserialize_bst_empty_and_trailing_text():
    assert deserialize_bst("") is None
    decoded = deserialize_bst("2,1,3")
    assert preorder_values(decoded) == [2, 1]


def test_deserialize_bst_bad_token():
    with pytest.raises(ValueError):
        deserialize_bst("1,x,")


def test_serialize_tree_format():
    assert serialize_tree(None) == "N,"
    assert serialize_tree(TreeNode(1, None, TreeNode(2))) == "1,N,2,N,N,"


@pytest.mark.parametrize(
    "root",
    [
        None,
        TreeNode(1),
        TreeNode(5, TreeNode(9, TreeNode(-3)), TreeNode(1, None, TreeNode(5))),
        sorted_array_to_bst(list(range(12))),
    ],
)
def test_tree_round_trip(root):
    assert shape(deserialize_tree(serialize_tree(root))) == shape(root)


def test_deserialize_tree_tolerates_missing_tokens():
    decoded = deserialize_tree("1,2")
    assert shape(decoded) == (1, (2, None, None), None)
    assert deserialize_tree("") is None


def test_deserialize_tree_bad_token():
    with pytest.raises(ValueError):
        deserialize_tree("1,,N,")