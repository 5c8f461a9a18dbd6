import numpy
import pytest

from elmap import PeriodicGrid, IndexOverflow


@pytest.fixture
def grid():
    g = PeriodicGrid((3, 4, 5), (6, 8, 10))
    for i in range(3):
        for j in range(4):
            for k in range(5):
                g.set(i, j, k, 100 * i + 10 * j + k)
    return g


def test_third_axis_varies_fastest(grid):
    assert grid.voxel_count() == 60
    assert grid.index(0, 0, 1) == 1
    assert grid.index(0, 1, 0) == 5
    assert grid.index(1, 0, 0) == 20
    assert grid.values[grid.index(2, 3, 4)] == 234


@pytest.mark.parametrize("m", [-3, -1, 1, 2, 7])
def test_periodicity(grid, m):
    for i, j, k in [(0, 0, 0), (1, 2, 3), (2, 3, 4)]:
        v = grid.get(i, j, k)
        assert grid.get(i + 3 * m, j, k) == v
        assert grid.get(i, j + 4 * m, k) == v
        assert grid.get(i, j, k + 5 * m) == v


def test_negative_indices_wrap(grid):
    assert grid.index(-1, -1, -1) == grid.index(2, 3, 4)
    assert grid.get(-1, 0, 0) == 200


def test_set_get_round_trip():
    g = PeriodicGrid((2, 2, 2))
    g.set(-1, -1, -1, 0.1)
    assert g.get(1, 1, 1) == numpy.float32(0.1)
    assert g.values.dtype == numpy.float32


def test_fractional_coordinates_use_cell_grid(grid):
    assert grid.grid_to_frac(3, 4, 5) == (0.5, 0.5, 0.5)
    assert grid.grid_to_frac(-6, 0, 10) == (-1.0, 0.0, 1.0)


def test_frac_to_grid_rounds_down(grid):
    assert grid.frac_to_grid((0.5, 0.5, 0.5)) == (3, 4, 5)
    assert grid.frac_to_grid((-0.01, 0.99, 0.26)) == (-1, 7, 2)
    assert grid.frac_to_grid((-1.0, -0.5, 0.0)) == (-6, -4, 0)


def test_vectorized_access_matches_scalar(grid):
    i = numpy.array([0, -1, 5, 2])
    j = numpy.array([0, 3, -2, 9])
    k = numpy.array([0, 4, 1, -6])
    expected = [grid.get(a, b, c) for a, b, c in zip(i, j, k)]
    assert list(grid.get_values(i, j, k)) == expected
    assert list(grid.indices(i, j, k)) == [grid.index(a, b, c) for a, b, c in zip(i, j, k)]


def test_repeated_writes_keep_last_value():
    g = PeriodicGrid((2, 2, 2))
    g.set_values([0, 2, 0, -2], [0, 0, 1, 0], [0, 0, 0, 2], [1, 2, 3, 4])
    assert g.get(0, 0, 0) == 4
    assert g.get(0, 1, 0) == 3


def test_offset_beyond_buffer_is_an_error():
    g = PeriodicGrid((2, 2, 2))
    g.values = g.values[:7]
    assert g.index(1, 1, 0) == 6
    with pytest.raises(IndexOverflow):
        g.index(1, 1, 1)
    with pytest.raises(IndexOverflow):
        g.indices([0, 1], [0, 1], [0, 1])


@pytest.mark.parametrize("n_real,n_grid", [((0, 2, 2), None), ((2, 2), None), ((2, 2, 2), (2, -1, 2))])
def test_invalid_sizes(n_real, n_grid):
    with pytest.raises(ValueError):
        PeriodicGrid(n_real, n_grid)


def test_matrix_is_read_only_view(grid):
    m = grid.matrix()
    assert m.shape == (3, 4, 5)
    assert m[1, 2, 3] == grid.get(1, 2, 3)
    assert not m.flags.writeable
    grid.set(1, 2, 3, -5)
    assert m[1, 2, 3] == -5
