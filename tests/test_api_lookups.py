import pytest


def test_branch_lookups(client):
    client.post("/api/Branch", json={"Name": "Downtown"})
    client.post("/api/Branch", json={"Name": "Uptown"})

    response = client.get("/api/BranchLookups")
    assert response.status_code == 200
    assert response.json() == [{"ID": 1, "Text": "Downtown"}, {"ID": 2, "Text": "Uptown"}]

    response = client.get("/api/BranchLookups/2")
    assert response.status_code == 200
    assert response.json() == {"ID": 2, "Text": "Uptown"}


@pytest.mark.parametrize("resource", ["Account", "Branch", "Customer", "Employee"])
def test_lookup_of_missing_record_is_404(client, resource):
    assert client.get(f"/api/{resource}Lookups/1").status_code == 404


@pytest.mark.parametrize("resource", ["Account", "Branch", "Customer", "Employee"])
def test_lookups_empty(client, resource):
    response = client.get(f"/api/{resource}Lookups")
    assert response.status_code == 200
    assert response.json() == []


def test_customer_lookup_text_is_name(client):
    customer = client.post("/api/Customer", json={"Name": "Jane Doe"}).json()
    response = client.get(f"/api/CustomerLookups/{customer['CustomerID']}")
    assert response.json() == {"ID": customer["CustomerID"], "Text": "Jane Doe"}


def test_employee_lookup_text_is_display_name(client):
    employee = client.post("/api/Employee", json={"FirstName": "John", "LastName": "Smith"}).json()
    response = client.get("/api/EmployeeLookups")
    assert response.json() == [{"ID": employee["EmployeeID"], "Text": "Smith, John"}]


def test_account_lookup_text_is_ticket(client):
    account = client.post("/api/Account", json={"BalanceAvailable": 10}).json()
    response = client.get(f"/api/AccountLookups/{account['AccountID']}")
    assert response.json() == {"ID": account["AccountID"], "Text": account["AccountTicket"]}


def test_lookups_match_records_one_to_one(client):
    ids = [client.post("/api/Customer", json={"Name": f"Customer {n}"}).json()["CustomerID"] for n in range(5)]
    client.delete(f"/api/Customer/{ids[2]}")
    pairs = client.get("/api/CustomerLookups").json()
    records = client.get("/api/Customer").json()
    assert [pair["ID"] for pair in pairs] == [record["CustomerID"] for record in records]
    assert ids[2] not in {pair["ID"] for pair in pairs}
