from .proc_maps import (
    parse,
    parse_self,
    parse_line,
    parse_lines,
    DEFAULT_PROC_ROOT,
)
from .mapping import (
    MappingCollection,
    MemoryRegion,
    PermissionFlags,
)
from .exceptions import (
    ProcMapsException,
    ResourceNotFound,
    ResourceOpenError,
    DecodeError,
    FormatError,
    IntParseError,
    UnknownMapping,
)
from . import decoders
