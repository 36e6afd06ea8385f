from fastapi.testclient import TestClient

from main import create_app


def get(server, token, **params):
    return server.get("/", params=params, headers={"AccessToken": token})


def test_bad_token_is_unauthorized(server):
    resp = get(server, "wrong")
    assert resp.status_code == 401
    assert resp.json() == {"Error": "Bad AccessToken"}


def test_missing_token_is_unauthorized(server):
    assert server.get("/").status_code == 401


def test_search_returns_wire_records(server, token):
    resp = get(server, token, query="Dillard")
    assert resp.status_code == 200
    assert resp.json()[0] == {
        "id": 4,
        "name": "Owen Dillard",
        "age": 28,
        "about": "Lorem id do consectetur laborum. Fugiat labore ullamco esse magna.",
        "gender": "male",
    }


def test_bad_order_field(server, token):
    resp = get(server, token, order_field="invalid", order_by=1)
    assert resp.status_code == 400
    assert resp.json() == {"Error": "ErrorBadOrderField"}


def test_lenient_parameters(server, token):
    resp = get(server, token, order_by="sideways", order_field="invalid", limit="many", offset="x")
    assert resp.status_code == 200
    assert [user["id"] for user in resp.json()] == list(range(30))


def test_out_of_range_order_by_means_as_is(server, token):
    resp = get(server, token, order_by=7, order_field="invalid", limit=3)
    assert [user["id"] for user in resp.json()] == [0, 1, 2]


def test_sort_and_page(server, token):
    resp = get(server, token, order_field="Id", order_by=-1, limit=2, offset=1)
    assert [user["id"] for user in resp.json()] == [28, 27]


def test_offset_past_end_is_empty(server, token):
    resp = get(server, token, limit=5, offset=100)
    assert resp.status_code == 200
    assert resp.json() == []


def test_repeated_requests_are_identical(server, token):
    first = get(server, token, order_field="Age", order_by=1, limit=10)
    second = get(server, token, order_field="Age", order_by=1, limit=10)
    assert first.content == second.content


def test_dataset_not_loaded_is_fatal(token):
    server = TestClient(create_app())
    resp = get(server, token)
    assert resp.status_code == 500
    assert "Error" in resp.json()


def test_health(server):
    resp = server.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.json()["records"] == 30
