class CompairError(Exception):
    """Base class for errors raised while preparing a comparison."""


class LoaderError(CompairError):
    """A source could not be turned into text."""


class MissingInputError(LoaderError):
    def __init__(self, message: str = "Please select both files."):
        super().__init__(message)


class SourceReadError(LoaderError):
    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not read {file_name}: {reason}")


class SourceTooLargeError(LoaderError):
    def __init__(self, file_name: str, limit: int):
        self.file_name = file_name
        self.limit = limit
        super().__init__(f"{file_name} is larger than the {limit} byte upload limit")
