import pytest

from usersearch.errors import InvalidArgument, RemoteRejected, Unauthorized
from usersearch.schemas import OrderBy, SearchRequest
from usersearch.services.search_client import SearchClient

VALID_TOKEN = "valid token"

URL = "http://testserver/search"


@pytest.fixture()
def search_client(client):
    return SearchClient(URL, VALID_TOKEN, http_client=client)


def test_highest_id_first_with_next_page(search_client):
    result = search_client.search(SearchRequest(limit=1, offset=0, order_field="ID", order_by=OrderBy.DESC))
    assert [u.id for u in result.users] == [34]
    assert result.next_page is True


def test_clamped_limit_without_match(search_client):
    result = search_client.search(
        SearchRequest(limit=26, offset=1, query="Boyd", order_field="ID", order_by=OrderBy.AS_IS)
    )
    assert result.users == []
    assert result.next_page is False


def test_zero_limit_reports_next_page(search_client):
    result = search_client.search(SearchRequest(limit=0, query="dolor", order_field="Name", order_by=OrderBy.ASC))
    assert result.users == []
    assert result.next_page is True


def test_paging_through_query(search_client):
    first = search_client.search(SearchRequest(limit=2, query="dolor", order_by=OrderBy.DESC))
    assert [u.name for u in first.users] == ["Whitley Davidson", "Lowery York"]
    assert first.next_page is True

    second = search_client.search(SearchRequest(limit=2, offset=2, query="dolor", order_by=OrderBy.DESC))
    assert [u.name for u in second.users] == ["Everett Dillard", "Christy Knapp"]
    assert second.next_page is False


def test_age_descending_is_stable(search_client):
    result = search_client.search(SearchRequest(limit=2, order_field="Age", order_by=OrderBy.DESC))
    assert [u.id for u in result.users] == [13, 32]
    assert result.next_page is True


def test_offset_past_end(search_client):
    result = search_client.search(SearchRequest(limit=1, offset=1000))
    assert result.users == []
    assert result.next_page is False


def test_unknown_order_field(search_client):
    with pytest.raises(InvalidArgument, match="OrderField God invalid"):
        search_client.search(SearchRequest(limit=2, order_field="God", order_by=OrderBy.DESC))


def test_unknown_order_by(search_client):
    with pytest.raises(RemoteRejected) as exc_info:
        search_client.search(SearchRequest(limit=2, order_by=7))
    assert exc_info.value.code == "ErrorBadOrderBy"


def test_bad_token(client):
    search_client = SearchClient(URL, "invalid_token", http_client=client)
    with pytest.raises(Unauthorized):
        search_client.search(SearchRequest(limit=1))
