"""
Tests for node generation and TSPLIB loading.
"""

import random

import pytest

from tsp_solver.data import Node, load_nodes, random_nodes


SQUARE_TSP = """NAME: square4
TYPE: TSP
COMMENT: unit square
DIMENSION: 4
EDGE_WEIGHT_TYPE: EUC_2D
NODE_COORD_SECTION
1 0 0
2 1 0
3 1 1
4 0 1
EOF
"""

EXPLICIT_TSP = """NAME: tiny
TYPE: TSP
DIMENSION: 3
EDGE_WEIGHT_TYPE: EXPLICIT
EDGE_WEIGHT_FORMAT: FULL_MATRIX
EDGE_WEIGHT_SECTION
0 1 2
1 0 3
2 3 0
EOF
"""


class TestNode:
    def test_str(self):
        assert str(Node(id=3, x=1.0, y=22.456)) == "3: (1.00, 22.46)"

    def test_immutable(self):
        node = Node(id=0, x=0.0, y=0.0)
        with pytest.raises(AttributeError):
            node.x = 1.0


class TestRandomNodes:
    def test_ids_and_bounds(self):
        nodes = random_nodes(20, random.Random(1))
        assert [n.id for n in nodes] == list(range(20))
        for n in nodes:
            assert 0.0 <= n.x <= 100.0
            assert 0.0 <= n.y <= 100.0

    def test_seeded(self):
        assert random_nodes(5, random.Random(2)) == random_nodes(5, random.Random(2))

    def test_square_size(self):
        nodes = random_nodes(10, random.Random(3), square_size=1.0)
        assert all(n.x <= 1.0 and n.y <= 1.0 for n in nodes)


class TestLoadNodes:
    def test_euc_2d(self, tmp_path):
        path = tmp_path / "square4.tsp"
        path.write_text(SQUARE_TSP)
        nodes = load_nodes(path)
        assert [n.id for n in nodes] == [1, 2, 3, 4]
        assert (nodes[2].x, nodes[2].y) == (1.0, 1.0)

    def test_rejects_explicit_weights(self, tmp_path):
        path = tmp_path / "tiny.tsp"
        path.write_text(EXPLICIT_TSP)
        with pytest.raises(ValueError):
            load_nodes(path)
