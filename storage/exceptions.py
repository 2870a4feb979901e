# storage/exceptions.py
"""Storage exceptions."""

from typing import Any


class StorageError(Exception):
    """Base storage error."""
    pass


class FileNotFound(StorageError):
    """Key does not exist."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'The file "{key}" was not found.')


class FileAlreadyExists(StorageError):
    """Key exists and overwriting was not requested."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'The file "{key}" already exists and can not be overwritten.')


class UnexpectedFile(StorageError):
    """Key exists where none was expected (e.g. rename target)."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'The file "{key}" was not expected to exist.')


class StorageFailure(StorageError):
    """The backend failed while performing an operation.

    The original backend exception is kept in ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        details = ", ".join(f"{name}={value!r}" for name, value in self.context.items())
        super().__init__(f"An unexpected error happened during {operation} ({details}).")

    @classmethod
    def unexpected_failure(
        cls,
        operation: str,
        context: dict[str, Any],
        cause: BaseException,
    ) -> "StorageFailure":
        """Wrap an exception raised by an adapter."""
        failure = cls(operation, context, cause)
        failure.__cause__ = cause
        return failure


class UnsupportedCapability(NotImplementedError):
    """Adapter lacks an optional capability the caller asked for.

    A caller/adapter mismatch, not a storage condition; it does not derive
    from StorageError.
    """

    def __init__(self, adapter: object, capability: str):
        self.adapter = adapter
        self.capability = capability
        super().__init__(f'Adapter "{type(adapter).__name__}" cannot provide {capability}')
