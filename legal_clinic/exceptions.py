class LegalClinicError(Exception):
    """Base exception for portal errors."""
    pass


class SettingsError(LegalClinicError):
    """Settings file missing or invalid."""
    pass


class ApiError(LegalClinicError):
    """The remote API answered with an error.

    The message is human readable and meant to be shown next to the
    form or action that triggered the call.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UnauthorizedError(ApiError):
    """Credential missing, rejected or expired (HTTP 401)."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=401)


class NoResponseError(ApiError):
    """The request was sent but no response came back."""

    def __init__(self, message: str = "No response from server") -> None:
        super().__init__(message, status_code=None)
