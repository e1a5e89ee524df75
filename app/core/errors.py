"""
Error taxonomy shared by services and the HTTP boundary.

Services raise these; app.main renders them as {"detail", "kind"} with the
matching status code.
"""


class ServiceError(Exception):
    kind = "service_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or malformed required input"""
    kind = "validation_error"
    status_code = 400


class NotFoundError(ServiceError):
    """Referenced entity does not exist"""
    kind = "not_found"
    status_code = 404


class ForbiddenError(ServiceError):
    """Caller lacks the required role"""
    kind = "forbidden"
    status_code = 403


class PersistenceError(ServiceError):
    """Underlying store failure"""
    kind = "persistence_error"
    status_code = 500


class UpstreamUnavailable(ServiceError):
    """Assistant gateway failure; recovered inside the assistant service"""
    kind = "upstream_unavailable"
    status_code = 503

    def __init__(self, message: str, overloaded: bool = False):
        super().__init__(message)
        self.overloaded = overloaded
