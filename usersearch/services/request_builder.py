from dataclasses import dataclass
from typing import Dict, Union

import httpx

from ..errors import InvalidArgument
from ..schemas import MAX_LIMIT, SearchRequest


@dataclass(frozen=True)
class SearchParams:
    params: Dict[str, Union[int, str]]
    wire_limit: int

    def encoded(self) -> str:
        return str(httpx.QueryParams(self.params))


def build_search_params(request: SearchRequest) -> SearchParams:
    if request.limit < 0:
        raise InvalidArgument("limit must be >= 0", field="limit")
    if request.offset < 0:
        raise InvalidArgument("offset must be >= 0", field="offset")

    limit = min(request.limit, MAX_LIMIT)
    # one extra record tells us whether a next page exists
    wire_limit = limit + 1

    params = {
        "limit": wire_limit,
        "offset": request.offset,
        "query": request.query,
        "order_field": request.order_field,
        "order_by": int(request.order_by),
    }
    return SearchParams(params=params, wire_limit=wire_limit)
