from typing import Mapping, Optional

from fastapi import status
from src.libs.result import Error

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class ClientError(Exception):
    """Use-case error caused by the caller, rendered as a 4xx JSON error"""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = dict(headers) if headers else None
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected use-case error; the message is logged, never returned"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
