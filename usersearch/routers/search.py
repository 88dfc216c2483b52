from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Security
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader

from ..dataset.query import resolve_order_field, search_dataset
from ..errors import InvalidArgument
from ..metrics import search_queries, search_results_returned
from ..schemas import OrderBy, RemoteErrorCode, SearchRequest, User

router = APIRouter(prefix="/search", tags=["Search"])
access_token_header = APIKeyHeader(name="AccessToken", auto_error=False)


def require_access_token(
    request: Request,
    token: Optional[str] = Security(access_token_header),
):
    settings = request.app.state.settings
    if settings is None:
        raise HTTPException(status_code=500, detail="search service not configured")
    if token is None or token != settings.access_token:
        raise HTTPException(status_code=401, detail="Bad AccessToken")
    return token


def _bad_request(code: RemoteErrorCode) -> JSONResponse:
    search_queries.labels(source="dataset", status="bad_request").inc()
    return JSONResponse(status_code=400, content={"error": code.value})


def _validate(search: SearchRequest) -> Optional[RemoteErrorCode]:
    if search.limit < 0:
        return RemoteErrorCode.BAD_LIMIT
    if search.offset < 0:
        return RemoteErrorCode.BAD_OFFSET
    if search.order_by not in {o.value for o in OrderBy}:
        return RemoteErrorCode.BAD_ORDER_BY
    try:
        resolve_order_field(search.order_field)
    except InvalidArgument:
        return RemoteErrorCode.BAD_ORDER_FIELD
    return None


@router.get(
    "",
    response_model=List[User],
    summary="Search users in the loaded dataset",
    responses={
        400: {"description": "Bad parameter", "content": {"application/json": {"example": {"error": "ErrorBadOrderField"}}}},
        401: {"description": "Bad AccessToken"},
        500: {"description": "Dataset unavailable"},
    },
)
def search_users(
    request: Request,
    _token: str = Depends(require_access_token),
    limit: int = 0,
    offset: int = 0,
    query: str = "",
    order_field: str = "",
    order_by: int = 0,
):
    users = getattr(request.app.state, "users", None)
    if users is None:
        search_queries.labels(source="dataset", status="unavailable").inc()
        raise HTTPException(status_code=500, detail="dataset unavailable")

    search = SearchRequest(
        limit=limit,
        offset=offset,
        query=query,
        order_field=order_field,
        order_by=order_by,
    )
    code = _validate(search)
    if code is not None:
        return _bad_request(code)

    page = [user.to_user() for user in search_dataset(users, search)]
    search_queries.labels(source="dataset", status="ok").inc()
    search_results_returned.labels(source="dataset", status="ok").observe(len(page))
    return page
