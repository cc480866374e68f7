"""
Error kinds raised by the data helpers.

Controllers let these propagate; middleware/error_handlers.py turns them into
the {"success": false, "message": ...} envelope with the matching status code.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    """Missing id or slug"""
    status_code = 404


class ValidationFailure(AppError):
    """Payload or state transition rejected"""
    status_code = 400


class StorageFailure(AppError):
    """Document store call failed"""
    status_code = 500
