class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InvalidPurchaseError(DomainError):
    """Raised when a ticket purchase breaks any business rule.

    The message is informational only; callers must not branch on it.
    """

    def __init__(self, message: str = 'Invalid ticket purchase') -> None:
        super().__init__(message, 400)
