class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    code: str = 'error'

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(CustomBaseError):
    code = 'validation_error'

    def __init__(self, message: str, status_code: int = 422) -> None:
        super().__init__(message, status_code)


class PolicyViolationError(CustomBaseError):
    def __init__(self, message: str, code: str) -> None:
        self.code = code
        super().__init__(message, 422)


class ConflictError(CustomBaseError):
    code = 'conflict'

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class NotFoundError(CustomBaseError):
    code = 'not_found'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class StateError(CustomBaseError):
    code = 'invalid_state'

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
