from typing import Callable, Dict, List, Sequence

from ..errors import InvalidArgument
from ..schemas import OrderBy, OrderField, SearchRequest
from .loader import DatasetUser

_SORT_KEYS: Dict[OrderField, Callable[[DatasetUser], object]] = {
    OrderField.ID: lambda user: user.id,
    OrderField.NAME: lambda user: user.name,
    OrderField.AGE: lambda user: user.age,
}


def resolve_order_field(order_field: str) -> OrderField:
    if not order_field:
        return OrderField.NAME
    try:
        return OrderField(order_field)
    except ValueError:
        raise InvalidArgument("OrderField invalid", field=order_field) from None


def filter_users(users: Sequence[DatasetUser], query: str) -> List[DatasetUser]:
    if not query:
        return list(users)
    needle = query.lower()
    return [
        user for user in users
        if needle in user.name.lower() or needle in user.about.lower()
    ]


def sort_users(users: Sequence[DatasetUser], order_field: str, order_by: int) -> List[DatasetUser]:
    field = resolve_order_field(order_field)
    if order_by == OrderBy.AS_IS:
        return list(users)
    # sorted() is stable in both directions
    return sorted(users, key=_SORT_KEYS[field], reverse=order_by == OrderBy.DESC)


def paginate_users(users: Sequence[DatasetUser], offset: int, limit: int) -> List[DatasetUser]:
    if offset > len(users):
        return []
    end = min(offset + limit, len(users))
    return list(users[offset:end])


def search_dataset(users: Sequence[DatasetUser], request: SearchRequest) -> List[DatasetUser]:
    filtered = filter_users(users, request.query)
    ordered = sort_users(filtered, request.order_field, request.order_by)
    return paginate_users(ordered, request.offset, request.limit)
