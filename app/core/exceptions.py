class CinemaError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CinemaError):
    def __init__(self, message: str = "Record not found"):
        super().__init__(message, status_code=404)


class MovieNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Movie not found")


class ScreeningNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Screening not found")


class PersistenceError(CinemaError):
    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class ValidationFailedError(CinemaError):
    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("Validation failed", status_code=422)
