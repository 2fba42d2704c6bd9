"""Relate file backed regions to the ELF segments they were loaded from."""
from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

from .exceptions import UnknownMapping


def _starts_in_window(header, region):
    return region.offset <= header.p_offset < region.offset + region.size


def _covers_window_start(header, region):
    # a segment split by mprotect (e.g. RELRO) leaves later pages starting mid segment
    return header.p_offset <= region.offset < header.p_offset + header.p_filesz


def load_segment(region):
    """Return the PT_LOAD segment of ``region.path`` that ``region`` maps.

    A segment starting inside the region's file window wins; only when none
    does is a segment running through the window's first byte used.
    """
    if region.path is None:
        raise UnknownMapping('Anonymous region {!r} has no backing file'.format(region))
    try:
        with open(region.path, 'rb') as fh:
            elf = ELFFile(fh)
            loads = [seg for seg in elf.iter_segments() if seg.header.p_type == 'PT_LOAD']
    except (OSError, ELFError) as e:
        raise UnknownMapping('Could not read ELF file {!r}: {}'.format(region.path, e)) from e
    for matches in (_starts_in_window, _covers_window_start):
        for segment in loads:
            if matches(segment.header, region):
                return segment
    raise UnknownMapping('No PT_LOAD segment of {!r} backs {!r}'.format(region.path, region))


def load_bias(region):
    """Return the amount to add to an ELF virtual address to find it in memory."""
    header = load_segment(region).header
    return region.start_addr + (header.p_offset - region.offset) - header.p_vaddr
