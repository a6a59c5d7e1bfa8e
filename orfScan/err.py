""" Exceptions raised by orfScan """


class OrfScanError(Exception):
    """ Base class of all orfScan errors """

class InvalidCodeId(OrfScanError, ValueError):
    """ Error to be raised when a genetic code id is not supported. """
    def __init__(self, code_id, supported=None):
        self.code_id = code_id
        msg = f"Genetic code table id {code_id!r} is not supported."
        if supported:
            msg += f" Valid ids: {', '.join(str(x) for x in supported)}"
        super().__init__(msg)

class NonRewindableSource(OrfScanError):
    """ Error to be raised when an operation needs to reposition a source that
    can only be read forward, e.g. bottom strand scanning of stdin. """
    def __init__(self, name:str, msg:str=None):
        self.name = name
        if msg is None:
            msg = f"Sequence source '{name}' is not rewindable. The bottom " +\
                "strand can not be scanned; restrict the scan to --watson."
        super().__init__(msg)

class WindowOutOfRange(OrfScanError, IndexError):
    """ Error to be raised when a window or offset falls outside the
    sequence or the loaded buffer. """

class SequenceIOError(OrfScanError, IOError):
    """ Error to be raised when nucleotides can not be read from a source. """
    def __init__(self, name:str, start:int, end:int, reason=None):
        self.name = name
        self.start = start
        self.end = end
        msg = f"Failed to read {name}:{start}-{end}"
        if reason is not None:
            msg += f" ({reason})"
        super().__init__(msg)
