class IdentityError(Exception):
    """Base class for errors surfaced to API callers with a status code."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'message': self.message}


class ValidationError(IdentityError):
    status_code = 400


class InvalidCredentials(IdentityError):
    status_code = 401


class UnknownIdentity(IdentityError):
    status_code = 404


class InternalInconsistency(IdentityError):
    status_code = 500


class StorageError(IdentityError):
    status_code = 500
