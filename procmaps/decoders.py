"""Decoders for the individual fields of a /proc/<pid>/maps line.

Each decoder takes one whitespace-free token and returns a typed value or
raises a :class:`~procmaps.exceptions.DecodeError` subclass.
"""
import re

from .exceptions import FormatError, IntParseError
from .mapping import PermissionFlags


_DIGITS = {
    10: re.compile(r'[0-9]+'),
    16: re.compile(r'[0-9a-fA-F]+'),
}

U32_MAX = (2 ** 32) - 1
U64_MAX = (2 ** 64) - 1


def parse_unsigned(token, base, maximum, error=IntParseError):
    # int() alone would accept signs, 0x prefixes, underscores and whitespace
    if _DIGITS[base].fullmatch(token) is None:
        raise error(token, 'invalid base {} digits'.format(base))
    value = int(token, base)
    if value > maximum:
        raise error(token, 'value does not fit in {} bits'.format(maximum.bit_length()))
    return value


def _split_pair(token, separator):
    pieces = token.split(separator)
    if len(pieces) != 2:
        raise FormatError(token, 'expected two {!r} separated values'.format(separator))
    return pieces


def decode_address_range(token):
    start, end = _split_pair(token, '-')
    start = parse_unsigned(start, 16, U64_MAX, error=FormatError)
    end = parse_unsigned(end, 16, U64_MAX, error=FormatError)
    if end <= start:
        raise FormatError(token, 'end address not above start address')
    return start, end


def decode_permissions(token):
    """Decode ``rwxp`` style flags; only the first three characters matter."""
    if len(token) < 3:
        raise FormatError(token, 'permissions need at least 3 characters')
    return PermissionFlags(
        read=token[0] == 'r',
        write=token[1] == 'w',
        execute=token[2] == 'x',
    )


def decode_offset(token):
    return parse_unsigned(token, 16, U64_MAX)


def decode_device(token):
    major, minor = _split_pair(token, ':')
    return parse_unsigned(major, 16, U32_MAX), parse_unsigned(minor, 16, U32_MAX)


def decode_inode(token):
    return parse_unsigned(token, 10, U32_MAX)
