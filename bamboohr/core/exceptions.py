class BambooHRError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(BambooHRError):
    pass


class RequestConstructionError(BambooHRError):
    def __init__(self, detail: str = "Could not build request"):
        super().__init__(detail)
        self.detail = detail


class TransportError(BambooHRError):
    def __init__(
        self,
        detail: str = "Request failed",
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.body = body


class DecodeError(BambooHRError):
    def __init__(self, detail: str = "Could not decode response"):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(BambooHRError):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail)
        self.detail = detail


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, email: str):
        super().__init__(detail="No employee found")
        self.email = email
