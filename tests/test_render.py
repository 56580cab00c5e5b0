"""Tests for the diagnostic tree drawing."""

from rangetree import RangeTree, render_tree


class TestRenderTree:
    """Tests for render_tree"""

    def test_empty(self):
        """Test an empty tree draws nothing."""
        assert render_tree(RangeTree.summing()) == ""

    def test_single(self):
        """Test a single leaf is just the root line."""
        assert render_tree(RangeTree.summing([7])) == "└─7\n"

    def test_right_heavy(self):
        """Test a three leaf tree, where only the right child has children."""
        expected = "└─6\n" "  ├─1\n" "  └─5\n" "    ├─2\n" "    └─3\n"
        assert render_tree(RangeTree.summing([1, 2, 3])) == expected

    def test_left_branch_gets_a_bar(self):
        """Test the children of a left child are joined by a vertical bar."""
        expected = (
            "└─10\n"
            "   ├─3\n"
            "   │ ├─1\n"
            "   │ └─2\n"
            "   └─7\n"
            "     ├─3\n"
            "     └─4\n"
        )
        assert render_tree(RangeTree.summing([1, 2, 3, 4])) == expected

    def test_pending_values_are_shown_pushed(self):
        """Test nodes below a pending tag are drawn with their assigned values."""
        tree = RangeTree.summing([0, 0, 0, 0])
        tree.assign(0, 4, 5)
        expected = (
            "└─20\n"
            "   ├─10\n"
            "   │  ├─5\n"
            "   │  └─5\n"
            "   └─10\n"
            "      ├─5\n"
            "      └─5\n"
        )
        assert render_tree(tree) == expected

    def test_does_not_modify(self):
        """Test drawing leaves pending tags where they are."""
        tree = RangeTree.summing([0, 0, 0, 0])
        tree.assign(0, 4, 5)
        before = (list(tree.nodes), list(tree.pending))
        render_tree(tree)
        assert (tree.nodes, tree.pending) == before

    def test_format(self):
        """Test the value formatter is used for every node."""
        tree = RangeTree.summing([1, 2])
        assert tree.render_debug_tree(hex) == "└─0x3\n" "    ├─0x1\n" "    └─0x2\n"
