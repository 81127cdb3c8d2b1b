__all__ = [
    "ContainerError",
    "InvalidArgumentError",
    "ContainerLookupError",
    "AlreadyRegisteredError",
    "NotRegisteredError",
    "ParameterExistsError",
    "ParameterNotFoundError",
]


class ContainerError(Exception):
    """Base class for all errors raised by the container."""

    pass


class InvalidArgumentError(ContainerError, TypeError):
    """Raised when an alias, parameter name, factory or factory flag has the wrong type."""

    pass


class ContainerLookupError(ContainerError, LookupError):
    """Raised when an operation conflicts with what the container currently holds."""

    pass


class AlreadyRegisteredError(ContainerLookupError):
    """Raised when registering a service under an alias that is already taken."""

    pass


class NotRegisteredError(ContainerLookupError):
    """Raised when resolving an alias that has no service definition."""

    pass


class ParameterExistsError(ContainerLookupError):
    """Raised when adding a parameter whose name is already in use."""

    pass


class ParameterNotFoundError(ContainerLookupError):
    """Raised when reading or updating a parameter that does not exist."""

    pass
