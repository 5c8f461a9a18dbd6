import numpy
import pytest

from elmap import parse_symop, is_identity_operator, grid_operator
from elmap import MalformedOperator, FileFormatError


def test_identity():
    m = parse_symop("X,Y,Z")
    assert m.shape == (3, 4)
    assert (m == [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0]]).all()


def test_hexagonal_operator():
    m = parse_symop("-Y,X-Y,Z+1/3")
    assert numpy.allclose(m, [[0, -1, 0, 0], [1, -1, 0, 0], [0, 0, 1, 1 / 3]])


def test_whitespace_and_leading_translation():
    m = parse_symop("  1/2+x , -y,\tz-1/4 " + " " * 50)
    assert numpy.allclose(m, [[1, 0, 0, 0.5], [0, -1, 0, 0], [0, 0, 1, -0.25]])


@pytest.mark.parametrize("text", ["x,y", "x,y,z,x", "x,y,2z", "x,y,z+a", "x,,z", "x,y,z+1/0", "x,y,z++1/2"])
def test_malformed_operators(text):
    with pytest.raises(MalformedOperator):
        parse_symop(text)


def test_malformed_operator_is_file_format_error():
    with pytest.raises(FileFormatError) as e:
        parse_symop("x,y,q")
    assert 'q' in str(e.value)


@pytest.mark.parametrize("text,identity", [
    ("x,y,z", True),
    ("  X, Y ,Z   \x00\x00", True),
    ("-x,y,z", False),
    ("x,y,z+1/2", False),
])
def test_identity_detection(text, identity):
    assert is_identity_operator(text) is identity


def test_translations_scaled_to_grid_units():
    g = grid_operator(parse_symop("x+1/2,-y,z-1/3"), (4, 6, 6))
    assert g.dtype.kind == 'i'
    assert g.tolist() == [[1, 0, 0, 2], [0, -1, 0, 0], [0, 0, 1, -2]]


def test_half_grid_translations_round_up():
    g = grid_operator(parse_symop("x+1/4,y-1/4,z"), (2, 2, 2))
    assert g[:, 3].tolist() == [1, 0, 0]
