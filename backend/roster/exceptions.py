class DomainException(Exception):
    """Base class for domain-specific exceptions.

    Carries enough information for a transport layer to render a client
    error (status, title, machine-readable code) without extra mapping.
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.code = code


class InvalidArgument(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=400,
            title="Invalid argument",
            detail=detail,
            code="invalid_argument",
        )


class OutOfRange(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=400,
            title="Out of range",
            detail=detail,
            code="out_of_range",
        )


class PlayerNotFound(DomainException):
    def __init__(self, player_id: int) -> None:
        super().__init__(
            status_code=404,
            title="Player not found",
            detail=f"player '{player_id}' not found",
            code="player_not_found",
        )
        self.player_id = player_id
