from enum import Enum, auto


class ApiError(Enum):
    NETWORK = auto()
    HTTP_STATUS = auto()
    MALFORMED_RESPONSE = auto()
    NOT_AUTHENTICATED = auto()
    MISSING_SESSION_COOKIE = auto()
