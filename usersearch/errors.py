from typing import Any, Dict, Optional


class SearchError(Exception):
    kind = "search"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(SearchError):
    kind = "invalid_argument"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class Timeout(SearchError):
    kind = "timeout"

    def __init__(self, message: str, params: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.params = params or {}


class TransportError(SearchError):
    kind = "transport"


class Unauthorized(SearchError):
    kind = "unauthorized"


class RemoteFault(SearchError):
    kind = "remote_fault"


class RemoteRejected(SearchError):
    kind = "remote_rejected"

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


class DecodeError(SearchError):
    kind = "decode"


class DatasetError(SearchError):
    kind = "dataset"
