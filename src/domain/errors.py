# src/domain/errors.py


class ChecksumError(Exception):
    """
    Base for every failure of a checksum lookup.

    `public_message` is the only text a remote caller ever sees.
    """
    status_code = 500
    public_message = "check logs"


class ClientError(ChecksumError):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.public_message = message


class EmptyInput(ClientError):
    pass


class DisallowedFile(ClientError):
    pass


class ServerError(ChecksumError):
    """Detail goes to the error log; callers get the generic message."""


class UnmappedFile(ServerError):
    pass


class DirectoryUnreadable(ServerError):
    pass


class NoFileFound(ServerError):
    pass


class FileUnreadable(ServerError):
    pass
