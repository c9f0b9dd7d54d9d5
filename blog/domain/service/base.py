"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services wrap repository calls with tracing and the rules that belong to
    no single post, such as identity checks and listing pagination.
    """
