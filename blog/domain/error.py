"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidIdentifierError(DomainError):
    """Raised when a path identifier is not a well-formed post id."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Invalid {resource} id: {identifier!r}")


class InvalidPageError(DomainError):
    """Raised when a list page number is not a positive integer."""

    def __init__(self, page: object):
        self.page = page
        super().__init__(f"Page must be a positive integer, got {page!r}")


class PayloadValidationError(DomainError):
    """Raised when a request payload fails schema validation.

    Carries the structured field errors so the interface layer can return them.
    """

    def __init__(self, errors: list):
        self.errors = errors
        fields = ", ".join(error.field or "<body>" for error in errors)
        super().__init__(f"Invalid payload: {fields}")


class NotAuthenticatedError(DomainError):
    """Raised when a request carries no valid identity."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PersistenceError(DomainError):
    """Raised when the store fails an operation.

    Never retried; the interface layer surfaces it as a 500 with the cause.
    """

    pass
