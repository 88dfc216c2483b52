from typing import List, NoReturn, Optional

from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError, InvalidArgument, RemoteFault, RemoteRejected, Unauthorized
from ..schemas import ErrorResponse, RemoteErrorCode, SearchResponse, User

_users_adapter = TypeAdapter(Optional[List[User]])


def _remote_error_code(raw: str) -> Optional[RemoteErrorCode]:
    try:
        return RemoteErrorCode(raw)
    except ValueError:
        return None


def _raise_bad_request(body: bytes, order_field: str) -> NoReturn:
    try:
        err = ErrorResponse.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"cant unpack error json: {exc}") from exc

    code = _remote_error_code(err.error)
    if code is RemoteErrorCode.BAD_ORDER_FIELD:
        raise InvalidArgument(f"OrderField {order_field} invalid", field=order_field)
    # every other code, known or not, is passed through as-is
    raise RemoteRejected(f"unknown bad request error: {err.error}", code=err.error)


def interpret_response(
    status_code: int,
    body: bytes,
    *,
    order_field: str,
    wire_limit: int,
) -> SearchResponse:
    if status_code == 401:
        raise Unauthorized("bad AccessToken")
    if status_code == 500:
        raise RemoteFault("search server fatal error")
    if status_code == 400:
        _raise_bad_request(body, order_field)

    try:
        users = _users_adapter.validate_json(body) or []
    except ValidationError as exc:
        raise DecodeError(f"cant unpack result json: {exc}") from exc

    if len(users) == wire_limit:
        return SearchResponse(users=users[:-1], next_page=True)
    return SearchResponse(users=users, next_page=False)
