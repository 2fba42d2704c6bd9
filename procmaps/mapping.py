from collections import namedtuple

import intervaltree


class PermissionFlags(namedtuple('PermissionFlags', 'read write execute')):
    __slots__ = ()

    def __repr__(self):
        return 'PermissionFlags(read={!r}, write={!r}, execute={!r})'.format(self.read, self.write, self.execute)

    def __str__(self):
        return '{}{}{}'.format('r' if self.read else '-', 'w' if self.write else '-', 'x' if self.execute else '-')


_region_fields = 'start_addr end_addr permissions offset device_major device_minor inode path'.split()


class MemoryRegion(namedtuple('MemoryRegion', _region_fields)):
    """One line of a maps file; ``path`` is None for anonymous mappings."""
    __slots__ = ()

    @property
    def is_readable(self):
        return self.permissions.read

    @property
    def is_writable(self):
        return self.permissions.write

    @property
    def is_executable(self):
        return self.permissions.execute

    @property
    def size(self):
        return self.end_addr - self.start_addr

    def contains(self, address):
        return self.start_addr <= address < self.end_addr

    def __repr__(self):
        return ('MemoryRegion(start_addr=0x{:x}, end_addr=0x{:x}, permissions={!r}, offset=0x{:x}, '
                'device_major={}, device_minor={}, inode={}, path={!r})').format(
                    self.start_addr, self.end_addr, self.permissions, self.offset,
                    self.device_major, self.device_minor, self.inode, self.path)


class MappingCollection:
    """Immutable, ordered regions of one maps file, in file order.

    Query results hand back the collection's own region objects. Regions are
    immutable so sharing them is safe, but they describe the process only as
    of the read that built this collection.
    """

    def __init__(self, regions=()):
        self._regions = tuple(regions)
        self._tree = intervaltree.IntervalTree()
        for index, region in enumerate(self._regions):
            if region.start_addr >= region.end_addr:
                raise ValueError('Region has an empty address range: {!r}'.format(region))
            self._tree.addi(region.start_addr, region.end_addr, index)

    def __len__(self):
        return len(self._regions)

    def __iter__(self):
        return iter(self._regions)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return MappingCollection(self._regions[key])
        return self._regions[key]

    def __eq__(self, other):
        if not isinstance(other, MappingCollection):
            return NotImplemented
        return self._regions == other._regions

    def __hash__(self):
        return hash(self._regions)

    def filter_by_path(self, path):
        return [region for region in self._regions if region.path is not None and region.path == path]

    def find_by_address(self, address):
        hits = self._tree[address]
        if not hits:
            return None
        # maps files never overlap, but keep the earliest if a hand built one does
        return self._regions[min(interval.data for interval in hits)]

    def paths(self):
        return list(dict.fromkeys(region.path for region in self._regions if region.path is not None))

    def __repr__(self):
        return 'MappingCollection({!r})'.format(list(self._regions))
