import pytest
from procmaps import MappingCollection, MemoryRegion, PermissionFlags


RX = PermissionFlags(True, False, True)
RW = PermissionFlags(True, True, False)


def make_region(start, end, path=None, permissions=RX):
    return MemoryRegion(start, end, permissions, 0, 8, 1, 0 if path is None else 42, path)


def make_collection():
    return MappingCollection([
        make_region(0x1000, 0x2000, '/lib/a.so'),
        make_region(0x2000, 0x3000, '/lib/b.so'),
        make_region(0x3000, 0x4000, None, RW),
        make_region(0x4000, 0x5000, '/lib/a.so', RW),
    ])


def test_filter_by_path_exact():
    maps = make_collection()
    matches = maps.filter_by_path('/lib/a.so')
    assert [region.start_addr for region in matches] == [0x1000, 0x4000]
    assert matches[0] is maps[0]


def test_filter_by_path_single_match():
    maps = MappingCollection([
        make_region(0x1000, 0x2000, '/lib/a.so'),
        make_region(0x2000, 0x3000, '/lib/b.so'),
        make_region(0x3000, 0x4000, None),
    ])
    assert maps.filter_by_path('/lib/a.so') == [maps[0]]
    assert maps.filter_by_path('/lib/c.so') == []


def test_filter_by_path_no_normalisation():
    maps = make_collection()
    assert maps.filter_by_path('/lib//a.so') == []
    assert maps.filter_by_path('a.so') == []
    assert maps.filter_by_path('') == []


def test_find_by_address():
    maps = make_collection()
    assert maps.find_by_address(0x1000) is maps[0]
    assert maps.find_by_address(0x1fff) is maps[0]
    assert maps.find_by_address(0x2000) is maps[1]
    assert maps.find_by_address(0x4fff) is maps[3]
    assert maps.find_by_address(0x5000) is None
    assert maps.find_by_address(0) is None


def test_paths():
    assert make_collection().paths() == ['/lib/a.so', '/lib/b.so']


def test_sequence_protocol():
    maps = make_collection()
    assert len(maps) == 4
    assert [region.start_addr for region in maps] == [0x1000, 0x2000, 0x3000, 0x4000]
    assert maps[-1].start_addr == 0x4000
    assert isinstance(maps[1:3], MappingCollection)
    assert len(maps[1:3]) == 2
    assert maps == make_collection()
    assert maps != MappingCollection()


def test_empty_collection():
    maps = MappingCollection()
    assert len(maps) == 0
    assert maps.filter_by_path('/lib/a.so') == []
    assert maps.find_by_address(0x1000) is None


def test_region_properties():
    region = make_region(0x1000, 0x3000, '/lib/a.so')
    assert region.is_readable
    assert not region.is_writable
    assert region.is_executable
    assert region.size == 0x2000
    assert region.contains(0x1000)
    assert region.contains(0x2fff)
    assert not region.contains(0x3000)


def test_region_is_immutable():
    region = make_region(0x1000, 0x2000)
    try:
        region.start_addr = 0
    except AttributeError:
        return
    assert False, "should have raised AttributeError"


def test_region_repr_uses_hex():
    text = repr(make_region(0x1000, 0x2000, '/lib/a.so'))
    assert 'start_addr=0x1000' in text
    assert 'end_addr=0x2000' in text
    assert "path='/lib/a.so'" in text


def test_permission_str():
    assert str(PermissionFlags(True, False, True)) == 'r-x'
    assert str(PermissionFlags(False, False, False)) == '---'


def test_collection_rejects_empty_range():
    with pytest.raises(ValueError):
        MappingCollection([make_region(0x1000, 0x2000), make_region(0x3000, 0x3000)])
    with pytest.raises(ValueError):
        MappingCollection([make_region(0x4000, 0x3000)])
