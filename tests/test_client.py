import json
from unittest import mock

import pytest
import requests

from bank_api.client import BankApiClient


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.headers["Content-Type"] = "application/json"
    response.url = "http://bank.test/"
    return response


@pytest.fixture()
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture()
def api(session):
    return BankApiClient(base_url="http://bank.test/", session=session)


def test_list(api, session):
    session.request.return_value = make_response(200, [{"BranchID": 1, "Name": "Downtown"}])
    data, error = api.list("Branch")
    assert error is None
    assert data == [{"BranchID": 1, "Name": "Downtown"}]
    session.request.assert_called_once_with(
        method="GET", url="http://bank.test/api/Branch", json=None, timeout=15
    )


def test_get_unwraps_array(api, session):
    session.request.return_value = make_response(200, [{"BranchID": 1, "Name": "Downtown"}])
    data, error = api.get("Branch", 1)
    assert error is None
    assert data == {"BranchID": 1, "Name": "Downtown"}
    assert session.request.call_args.kwargs["url"] == "http://bank.test/api/Branch/1"


def test_get_missing_reports_error(api, session):
    session.request.return_value = make_response(404, {"detail": "Branch 9 not found"})
    data, error = api.get("Branch", 9)
    assert data is None
    assert error == {"status_code": 404, "message": "Branch 9 not found"}


def test_create_posts_payload(api, session):
    session.request.return_value = make_response(201, {"CustomerID": 3, "Name": "Jane Doe"})
    data, error = api.create("Customer", {"Name": "Jane Doe"})
    assert error is None
    assert data["CustomerID"] == 3
    assert session.request.call_args.kwargs["method"] == "POST"
    assert session.request.call_args.kwargs["json"] == {"Name": "Jane Doe"}


def test_update_success_and_failure(api, session):
    session.request.return_value = make_response(204)
    assert api.update("Branch", 1, {"BranchID": 1, "Name": "Uptown"}) == (True, None)
    assert session.request.call_args.kwargs["method"] == "PUT"

    session.request.return_value = make_response(400, {"detail": "mismatch"})
    ok, error = api.update("Branch", 2, {"BranchID": 1, "Name": "Uptown"})
    assert not ok
    assert error["status_code"] == 400


def test_delete(api, session):
    session.request.return_value = make_response(200, {"EmployeeID": 4})
    data, error = api.delete("Employee", 4)
    assert (data, error) == ({"EmployeeID": 4}, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_lookups(api, session):
    session.request.return_value = make_response(200, [{"ID": 1, "Text": "Downtown"}])
    data, error = api.lookups("Branch")
    assert data == [{"ID": 1, "Text": "Downtown"}]
    assert session.request.call_args.kwargs["url"] == "http://bank.test/api/BranchLookups"

    session.request.return_value = make_response(200, {"ID": 1, "Text": "Downtown"})
    data, error = api.lookup("Branch", 1)
    assert data == {"ID": 1, "Text": "Downtown"}
    assert session.request.call_args.kwargs["url"] == "http://bank.test/api/BranchLookups/1"


def test_index_data_is_keyed_by_table_name(api, session):
    session.request.return_value = make_response(
        200, [{"Name": "Accounts", "Table": []}, {"Name": "Branches", "Table": [{"BranchID": 1}]}]
    )
    data, error = api.index_data()
    assert error is None
    assert data == {"Accounts": [], "Branches": [{"BranchID": 1}]}
    assert session.request.call_args.kwargs["url"] == "http://bank.test/indexdata"


def test_connection_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    data, error = api.list("Account")
    assert data == []
    assert error == {"status_code": None, "message": "refused"}
