import logging
import os
import re

from . import decoders
from .exceptions import ResourceNotFound, ResourceOpenError
from .mapping import MemoryRegion, MappingCollection


logger = logging.getLogger(__name__)

DEFAULT_PROC_ROOT = '/proc'

MIN_FIELDS = 5

# str.split() would also break on \x1c-\x1f, which are not Unicode White_Space
_SEPARATOR = re.compile(r'[^\S\x1c-\x1f]+')

# decoded in token order; each entry fills the named MemoryRegion fields
_FIELDS = (
    (('start_addr', 'end_addr'), decoders.decode_address_range),
    (('permissions',), decoders.decode_permissions),
    (('offset',), decoders.decode_offset),
    (('device_major', 'device_minor'), decoders.decode_device),
    (('inode',), decoders.decode_inode),
)


def maps_filename(pid, proc_root=DEFAULT_PROC_ROOT):
    return os.path.join(proc_root, '%d' % (pid,), 'maps')


def resource_exists(pid, proc_root=DEFAULT_PROC_ROOT):
    return os.path.exists(maps_filename(pid, proc_root))


def _lines(fh, pid, filename):
    with fh:
        try:
            for number, raw in enumerate(fh, 1):
                try:
                    yield raw.decode('utf-8')
                except UnicodeDecodeError:
                    logger.debug('Skipping undecodable line %d of %s', number, filename)
        except OSError as e:
            # e.g. ESRCH when the process exits part way through the read
            raise ResourceOpenError(pid, filename, e) from e


def open_resource(pid, proc_root=DEFAULT_PROC_ROOT):
    """Open the maps file of ``pid`` and return a generator of its lines."""
    filename = maps_filename(pid, proc_root)
    try:
        fh = open(filename, 'rb')
    except OSError as e:
        raise ResourceOpenError(pid, filename, e) from e
    logger.debug('Opened %s', filename)
    return _lines(fh, pid, filename)


def parse_line(line):
    """Decode one maps line, or return None if it has fewer than 5 fields.

    Only the first token after the inode is kept as the path, so paths
    containing spaces are truncated.
    """
    tokens = [token for token in _SEPARATOR.split(line) if token]
    if len(tokens) < MIN_FIELDS:
        if tokens:
            logger.debug('Skipping short maps line %r', line)
        return None
    values = {}
    for token, (names, decoder) in zip(tokens, _FIELDS):
        decoded = decoder(token)
        if len(names) == 1:
            decoded = (decoded,)
        values.update(zip(names, decoded))
    values['path'] = tokens[MIN_FIELDS] if len(tokens) > MIN_FIELDS else None
    return MemoryRegion(**values)


def parse_lines(lines):
    regions = []
    for line in lines:
        region = parse_line(line)
        if region is not None:
            regions.append(region)
    return MappingCollection(regions)


def parse(pid, proc_root=DEFAULT_PROC_ROOT):
    """Read and decode ``<proc_root>/<pid>/maps``.

    Raises ResourceNotFound before opening anything when the file is
    missing, ResourceOpenError when it cannot be opened, and a DecodeError
    subclass when any line with at least 5 fields fails to decode.
    """
    if not resource_exists(pid, proc_root):
        raise ResourceNotFound(pid, maps_filename(pid, proc_root))
    lines = open_resource(pid, proc_root)
    try:
        return parse_lines(lines)
    finally:
        close = getattr(lines, 'close', None)
        if close is not None:
            close()


def parse_self(proc_root=DEFAULT_PROC_ROOT):
    return parse(os.getpid(), proc_root)
