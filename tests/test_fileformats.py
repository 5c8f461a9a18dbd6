import numpy
import pytest

import elmap
from elmap import open_file, decode_buffer, sniff_file_type, UnknownFileType
from elmap.fileformats import file_format_by_name, file_type_from_suffix, file_type_from_colon_specifier
from elmap_test_utils import ccp4_bytes, dsn6_bytes


@pytest.fixture
def ccp4_data():
    return ccp4_bytes(numpy.arange(8), (2, 2, 2), rms=1)


@pytest.fixture
def dsn6_data():
    return dsn6_bytes(numpy.arange(12).reshape(2, 2, 3))


@pytest.mark.parametrize("name,format", [
    ('ccp4', 'ccp4'), ('map', 'ccp4'), ('mrc', 'ccp4'),
    ('dsn6', 'dsn6'), ('omap', 'dsn6'), ('brix', 'dsn6'),
])
def test_format_by_name(name, format):
    assert file_format_by_name(name).name == format


def test_unknown_format_name():
    with pytest.raises(UnknownFileType):
        file_format_by_name('xplor')


def test_decode_function():
    assert file_format_by_name('ccp4').decode_func is elmap.ccp4.decode
    assert file_format_by_name('dsn6').decode_func is elmap.dsn6.decode


def test_suffixes():
    assert file_type_from_suffix('maps/1abc.ccp4') == 'ccp4'
    assert file_type_from_suffix('1ABC.OMAP') == 'dsn6'
    assert file_type_from_suffix('noext') is None


def test_colon_specifier():
    assert file_type_from_colon_specifier('data.bin:dsn6') == ('dsn6', 'data.bin')
    assert file_type_from_colon_specifier('data.bin') == (None, 'data.bin')


def test_sniffing(ccp4_data, dsn6_data):
    assert sniff_file_type(ccp4_data) == 'ccp4'
    assert sniff_file_type(dsn6_data) == 'dsn6'
    assert sniff_file_type(ccp4_data[:208] + b'\0' * 4 + ccp4_data[212:]) == 'ccp4'
    assert sniff_file_type(b'\0' * 2048) is None
    assert sniff_file_type(b'') is None


def test_decode_buffer(dsn6_data):
    m = decode_buffer(dsn6_data, 'brix', name='x', is_diff_map=True)
    assert m.name == 'x'
    assert m.is_diff_map
    assert m.file_type == 'dsn6'


def test_open_by_suffix(tmp_path, ccp4_data):
    path = tmp_path / 'test.map'
    path.write_bytes(ccp4_data)
    m = open_file(str(path))
    assert m.name == 'test.map'
    assert m.file_type == 'ccp4'
    assert m.grid.get(1, 1, 1) == 7


def test_open_with_colon_specifier(tmp_path, dsn6_data):
    path = tmp_path / 'density.dat'
    path.write_bytes(dsn6_data)
    m = open_file(str(path) + ':dsn6')
    assert m.file_type == 'dsn6'
    assert m.name == 'density.dat'


def test_open_guesses_from_contents(tmp_path, ccp4_data):
    path = tmp_path / 'density.dat'
    path.write_bytes(ccp4_data)
    assert open_file(str(path)).file_type == 'ccp4'


def test_open_explicit_type_overrides_suffix(tmp_path, dsn6_data):
    path = tmp_path / 'density.map'
    path.write_bytes(dsn6_data)
    assert open_file(str(path), 'dsn6').file_type == 'dsn6'


def unstamped(data):
    return data[:208] + b'\0' * 4 + data[212:]


@pytest.mark.parametrize("n_grid", [(4, 4, 100), (4, 4, 25600), (100, 100, 100)])
def test_sniff_unstamped_ccp4_with_grid_size_100(n_grid):
    data = unstamped(ccp4_bytes(numpy.arange(8), (2, 2, 2), n_grid=n_grid, rms=1))
    assert sniff_file_type(data) == 'ccp4'


def test_decode_unstamped_ccp4_with_grid_size_100():
    data = unstamped(ccp4_bytes(numpy.arange(8), (2, 2, 2), n_grid=(4, 4, 100), rms=1))
    m = decode_buffer(data)
    assert m.file_type == 'ccp4'
    assert m.grid.n_grid == (4, 4, 100)
    assert m.grid.get(1, 1, 1) == 7


def test_sniff_requires_dsn6_sizes():
    header = bytearray(1024)
    header[36:38] = b'\x64\x00'
    assert sniff_file_type(bytes(header)) is None
    assert sniff_file_type(dsn6_bytes(numpy.arange(12).reshape(2, 2, 3), big_endian=True)) == 'dsn6'


def test_sniff_requires_ccp4_axis_order(ccp4_data):
    data = bytearray(unstamped(ccp4_data))
    data[64:76] = numpy.array([1, 1, 3], '<i4').tobytes()
    assert sniff_file_type(bytes(data)) is None
