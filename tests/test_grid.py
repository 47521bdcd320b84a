"""Tests for the immutable Grid value."""

import pytest

from mazes.domain.errors import InvalidCell, InvalidDimensions
from mazes.domain.grid import Grid


class TestCreate:
    def test_full_rectangle(self):
        grid = Grid.create(2, 3)

        assert grid.dimensions == (2, 3)
        assert grid.size == 6
        assert grid.cells == {(r, c) for r in range(2) for c in range(3)}
        assert dict(grid.links) == {}

    @pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2), (0, 0)])
    def test_rejects_non_positive_dimensions(self, rows, columns):
        with pytest.raises(InvalidDimensions):
            Grid.create(rows, columns)

    def test_invalid_dimensions_is_a_value_error(self):
        with pytest.raises(ValueError):
            Grid.create(0, 1)

    def test_from_cells_infers_dimensions(self, plus_mask):
        assert plus_mask.cells == {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)}
        assert plus_mask.dimensions == (3, 3)
        assert dict(plus_mask.links) == {}

    def test_from_cells_rejects_empty_set(self):
        with pytest.raises(InvalidDimensions):
            Grid.create_from_cells(set())

    def test_from_cells_rejects_negative_coordinates(self):
        with pytest.raises(InvalidCell):
            Grid.create_from_cells({(0, 0), (-1, 0)})

    @pytest.mark.parametrize("cell", [(1.7, 0.2), (0, 1.0), (True, 0), ("1", 0)])
    def test_from_cells_rejects_non_integer_coordinates(self, cell):
        with pytest.raises(InvalidCell):
            Grid.create_from_cells({(0, 0), cell})

    @pytest.mark.parametrize("cell", [(0,), (0, 1, 2)])
    def test_from_cells_rejects_cells_that_are_not_pairs(self, cell):
        with pytest.raises(InvalidCell):
            Grid.create_from_cells([(0, 0), cell])

    def test_from_cells_accepts_lists(self):
        grid = Grid.create_from_cells([[0, 0], [1, 2]])
        assert grid.cells == {(0, 0), (1, 2)}
        assert grid.dimensions == (2, 3)


class TestConstructorChecks:
    def test_accepts_consistent_grid(self):
        grid = Grid(rows=1, columns=2, cells={(0, 0), (0, 1)},
                    links={(0, 0): {(0, 1)}, (0, 1): {(0, 0)}})
        assert grid.is_linked((0, 1), (0, 0))

    @pytest.mark.parametrize("rows,columns", [(0, 2), (2, -1)])
    def test_rejects_non_positive_dimensions(self, rows, columns):
        with pytest.raises(InvalidDimensions):
            Grid(rows=rows, columns=columns, cells={(0, 0)})

    @pytest.mark.parametrize("cell", [(5, 5), (2, 0), (0, -1)])
    def test_rejects_cells_out_of_bounds(self, cell):
        with pytest.raises(InvalidCell):
            Grid(rows=2, columns=2, cells={(0, 0), cell})

    def test_rejects_non_integer_cells(self):
        with pytest.raises(InvalidCell):
            Grid(rows=2, columns=2, cells={(0, 0), (0.5, 1)})

    def test_rejects_link_to_missing_cell(self):
        with pytest.raises(InvalidCell):
            Grid(rows=2, columns=2, cells={(0, 0)}, links={(0, 0): {(7, 7)}})

    def test_rejects_link_from_masked_cell(self):
        with pytest.raises(InvalidCell):
            Grid(rows=2, columns=2, cells={(0, 0), (0, 1)},
                 links={(1, 1): {(0, 1)}, (0, 1): {(1, 1)}})

    def test_rejects_one_way_link(self):
        with pytest.raises(InvalidCell):
            Grid(rows=1, columns=2, cells={(0, 0), (0, 1)}, links={(0, 0): {(0, 1)}})

    def test_link_all_result_passes_checks(self, plus_mask):
        linked = plus_mask.link_all([((1, 1), (0, 1)), ((1, 1), (1, 2))])
        rebuilt = Grid(rows=linked.rows, columns=linked.columns,
                       cells=linked.cells, links=dict(linked.links))
        assert rebuilt == linked


class TestQueries:
    def test_exists(self, grid_2x2):
        for row in range(2):
            for column in range(2):
                assert grid_2x2.exists((row, column))

        assert not grid_2x2.exists((-1, 0))
        assert not grid_2x2.exists((1, 2))
        assert not grid_2x2.exists((2, 0))

    def test_exists_respects_mask(self, plus_mask):
        assert plus_mask.exists((1, 1))
        assert not plus_mask.exists((0, 0))
        assert not plus_mask.exists((2, 2))

    def test_neighbors_in_corner(self, grid_2x2):
        assert set(grid_2x2.neighbors((0, 0))) == {(1, 0), (0, 1)}

    def test_neighbors_fixed_order(self):
        grid = Grid.create(3, 3)
        assert grid.neighbors((1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]

    def test_neighbors_skip_masked_cells(self, plus_mask):
        assert plus_mask.neighbors((0, 1)) == [(1, 1)]
        assert set(plus_mask.neighbors((1, 1))) == {(0, 1), (2, 1), (1, 0), (1, 2)}

    def test_neighbor_by_direction(self, plus_mask):
        assert plus_mask.neighbor((1, 1), "north") == (0, 1)
        assert plus_mask.neighbor((0, 1), "east") is None

    def test_linked_defaults_to_empty(self, grid_2x2):
        assert grid_2x2.linked((0, 0)) == frozenset()


class TestLink:
    def test_link_is_bidirectional(self, grid_2x2):
        linked = grid_2x2.link((0, 0), (0, 1))

        assert linked.linked((0, 0)) == {(0, 1)}
        assert linked.linked((0, 1)) == {(0, 0)}
        assert linked.is_linked((0, 0), (0, 1))
        assert linked.is_linked((0, 1), (0, 0))
        assert not linked.is_linked((0, 0), (1, 0))

    def test_link_returns_new_grid(self, grid_2x2):
        linked = grid_2x2.link((0, 0), (0, 1))

        assert linked is not grid_2x2
        assert grid_2x2.link_count == 0
        assert linked.link_count == 1

    def test_link_is_idempotent(self, grid_2x2):
        once = grid_2x2.link((0, 0), (0, 1))
        twice = once.link((0, 1), (0, 0))

        assert twice == once
        assert twice.link_count == 1

    def test_link_rejects_missing_cells(self, plus_mask):
        with pytest.raises(InvalidCell):
            plus_mask.link((0, 0), (0, 1))
        with pytest.raises(InvalidCell):
            plus_mask.link((2, 1), (3, 1))

    def test_links_cannot_be_mutated(self, grid_2x2):
        linked = grid_2x2.link((0, 0), (0, 1))
        with pytest.raises(TypeError):
            linked.links[(1, 1)] = frozenset()

    def test_link_all_batches(self, grid_2x2):
        grid = grid_2x2.link_all([((0, 0), (0, 1)), ((0, 1), (1, 1)), ((0, 0), (0, 1))])

        assert grid.link_count == 2
        assert grid.link_pairs() == [((0, 0), (0, 1)), ((0, 1), (1, 1))]

    def test_equal_grids(self):
        a = Grid.create(2, 2).link((0, 0), (1, 0))
        b = Grid.create(2, 2).link((1, 0), (0, 0))
        assert a == b


class TestDerived:
    def test_linked_directions(self):
        grid = Grid.create(3, 3).link((1, 1), (0, 1)).link((1, 1), (1, 2))
        assert grid.linked_directions((1, 1)) == ["north", "east"]

    def test_direction_of(self, grid_2x2):
        assert grid_2x2.direction_of((0, 0), (1, 0)) == "south"
        assert grid_2x2.direction_of((1, 1), (1, 0)) == "west"
        with pytest.raises(ValueError):
            grid_2x2.direction_of((0, 0), (1, 1))

    def test_deadends(self):
        grid = Grid.create(1, 3).link((0, 0), (0, 1)).link((0, 1), (0, 2))
        assert grid.deadends() == [(0, 0), (0, 2)]


class TestHashing:
    def test_equal_grids_hash_equally(self):
        a = Grid.create(2, 2).link((0, 0), (1, 0))
        b = Grid.create(2, 2).link((1, 0), (0, 0))
        assert hash(a) == hash(b)

    def test_grids_in_a_set(self, grid_2x2):
        linked = grid_2x2.link((0, 0), (0, 1))
        seen = {grid_2x2, linked, Grid.create(2, 2), linked.link((0, 1), (0, 0))}
        assert len(seen) == 2
        assert Grid.create(2, 2) in seen

    def test_grid_as_dict_key(self, plus_mask):
        labels = {plus_mask: "plus"}
        assert labels[Grid.create_from_cells({(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)})] == "plus"
