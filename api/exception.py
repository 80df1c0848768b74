class ServiceError(Exception):
    """Raised by the service layer with a message that is safe to return to clients."""
    status_code = 400

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class StoreError(ServiceError):
    """Wraps a database failure; the underlying error is logged, not returned."""
    status_code = 500
