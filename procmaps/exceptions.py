

class ProcMapsException(Exception):
    pass


class ResourceNotFound(ProcMapsException):
    def __init__(self, pid, filename):
        super().__init__('No maps file for pid {} at {!r}'.format(pid, filename))
        self.pid = pid
        self.filename = filename


class ResourceOpenError(ProcMapsException):
    def __init__(self, pid, filename, cause):
        super().__init__('Could not open maps file {!r} for pid {}: {}'.format(filename, pid, cause))
        self.pid = pid
        self.filename = filename
        self.cause = cause


class DecodeError(ProcMapsException, ValueError):
    def __init__(self, token, reason):
        super().__init__('{} in {!r}'.format(reason, token))
        self.token = token
        self.reason = reason


class FormatError(DecodeError):
    pass


class IntParseError(DecodeError):
    pass


class UnknownMapping(ProcMapsException):
    pass
