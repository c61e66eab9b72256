"""Storage errors raised by the vault stores."""


class StorageError(RuntimeError):
    """Raised when a note or folder file cannot be read, written or removed."""


class NoteNotFoundError(StorageError):
    """Raised when a note file does not exist."""


class FolderFormatError(StorageError):
    """Raised when the folders document is not a valid folder list."""
