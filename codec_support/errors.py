from typing import Optional


class CodecError(Exception):
    """
    Raised when a value cannot be converted to or from bytes:
    unknown encodings, undecodable data, unreadable files or streams,
    and payload types the helper does not know how to handle.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
