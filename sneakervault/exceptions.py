"""Domain errors raised by services and translated to responses in api.errors."""


class SneakerVaultError(Exception):
    """Base class for all application errors."""


class ValidationFailed(SneakerVaultError):
    """Input did not match the expected shape.

    ``errors`` maps a field name to the messages describing what is wrong with it.
    """

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("Validation failed")
        self.errors = errors


class DuplicateFieldError(SneakerVaultError):
    """A unique field collides with another user's record."""

    field = ""

    def __init__(self, message: str | None = None):
        super().__init__(message or f"{self.field.capitalize()} already in use")


class DuplicateEmailError(DuplicateFieldError):
    field = "email"


class DuplicateUsernameError(DuplicateFieldError):
    field = "username"


class NotAuthenticatedError(SneakerVaultError):
    """No usable session.

    Raised the same way for a missing cookie, an unknown token, an expired session
    and an orphaned one so clients cannot tell them apart.
    """

    def __init__(self, clear_cookie: bool = False):
        super().__init__("Not authenticated")
        self.clear_cookie = clear_cookie


class InvalidCredentialsError(SneakerVaultError):
    """Email/password did not match. Says nothing about which part was wrong."""

    def __init__(self, message: str = "Invalid email or password", field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(SneakerVaultError):
    """Resource missing, or owned by somebody else."""


class UpstreamServiceError(SneakerVaultError):
    """An external API (sneaker catalog, blog) failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RedirectRequired(SneakerVaultError):  # noqa: N818
    """Raised by the page guard to send the browser somewhere else."""

    def __init__(self, location: str, clear_cookie: bool = False):
        super().__init__(f"Redirect to {location}")
        self.location = location
        self.clear_cookie = clear_cookie
