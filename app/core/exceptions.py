"""Domain errors raised by the library operations."""


class LibraryError(Exception):
    """Base class for errors the API reports back to the caller."""


class NotFoundError(LibraryError):
    def __init__(self, resource: str, key):
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} not found: {key}")


class BookAlreadyLoanedError(LibraryError, ValueError):
    def __init__(self, book_name: str):
        self.book_name = book_name
        super().__init__("The book is already on loan")
