class FileOrganizerError(Exception):
    """Base error for the project."""

class DirectoryAccessError(FileOrganizerError):
    pass

class PerFileOperationError(FileOrganizerError):
    """A single file could not be organized; the rest of the batch goes on."""
    def __init__(self, file_name: str, cause: Exception):
        super().__init__(str(cause))
        self.file_name = file_name
        self.cause = cause
