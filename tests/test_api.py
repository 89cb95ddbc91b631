"""End-to-end tests through the HTTP surface."""

import uuid

import pytest


@pytest.fixture
def acme(client):
    """alice is responsible for Acme; mallory exists but is not."""
    alice_id = client.post("/api/user/create", json={"username": "alice", "firstName": "Alice", "lastName": "Smith"}).json()["id"]
    client.post("/api/user/create", json={"username": "mallory", "firstName": "Mallory", "lastName": "Jones"})
    org = client.post("/api/org/create", json={"name": "Acme", "description": "Builds things", "type": "LLC"}).json()
    response = client.post("/api/orgresp/create", json={"organizationId": org["id"], "userId": alice_id})
    assert response.status_code == 200
    return {"alice_id": alice_id, "organization_id": org["id"]}


@pytest.fixture
def tender_json(client, acme):
    response = client.post(
        "/api/tenders/new",
        json={
            "name": "Bridge",
            "description": "Build a bridge",
            "serviceType": "Construction",
            "organizationId": acme["organization_id"],
            "creatorUsername": "alice",
        },
    )
    assert response.status_code == 200
    return response.json()


def test_ping(client):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.text == "ok"


class TestDirectoryEndpoints:
    def test_user_round_trip(self, client):
        created = client.post("/api/user/create", json={"username": "bob", "firstName": "Bob", "lastName": "Brown"})
        assert created.status_code == 200

        fetched = client.get(f"/api/user/{created.json()['id']}").json()
        assert fetched["username"] == "bob"
        assert fetched["firstName"] == "Bob"
        assert "createdAt" in fetched

    def test_duplicate_user(self, client):
        client.post("/api/user/create", json={"username": "bob"})
        response = client.post("/api/user/create", json={"username": "bob"})

        assert response.status_code == 400
        assert response.json() == {"reason": "User already exists"}

    def test_unknown_user_is_404(self, client):
        response = client.get(f"/api/user/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"reason": "User not found"}

    def test_invalid_body_is_400(self, client):
        response = client.post("/api/org/create", json={"name": "Acme", "type": "Partnership"})

        assert response.status_code == 400
        assert "reason" in response.json()

    def test_organization_and_responsibility(self, client, acme):
        org = client.get(f"/api/org/{acme['organization_id']}").json()
        assert org["type"] == "LLC"

        duplicate = client.post(
            "/api/orgresp/create",
            json={"organizationId": acme["organization_id"], "userId": acme["alice_id"]},
        )
        assert duplicate.status_code == 400
        assert duplicate.json() == {"reason": "Organization responsible already exists"}

    def test_responsibility_requires_existing_organization(self, client, acme):
        response = client.post("/api/orgresp/create", json={"organizationId": str(uuid.uuid4()), "userId": acme["alice_id"]})

        assert response.status_code == 404
        assert response.json() == {"reason": "Organization not found"}


class TestTenderEndpoints:
    def test_create_returns_camel_case(self, tender_json):
        assert tender_json["status"] == "Created"
        assert tender_json["serviceType"] == "Construction"
        assert tender_json["version"] == 1

    def test_create_requires_responsibility(self, client, acme):
        response = client.post(
            "/api/tenders/new",
            json={
                "name": "Road",
                "description": "Pave it",
                "serviceType": "Delivery",
                "organizationId": acme["organization_id"],
                "creatorUsername": "mallory",
            },
        )

        assert response.status_code == 403
        assert response.json() == {"reason": "Forbidden"}

    def test_unknown_requester_is_401(self, client, tender_json):
        response = client.get(f"/api/tenders/{tender_json['id']}/status", params={"username": "ghost"})

        assert response.status_code == 401
        assert response.json() == {"reason": "User not found"}

    def test_publish_flow(self, client, tender_json):
        tender_id = tender_json["id"]

        hidden = client.get(f"/api/tenders/{tender_id}/status", params={"username": "mallory"})
        assert hidden.status_code == 403

        published = client.put(
            f"/api/tenders/{tender_id}/status",
            params={"status": "Published", "username": "alice"},
        )
        assert published.status_code == 200
        assert published.json()["version"] == 2

        visible = client.get(f"/api/tenders/{tender_id}/status", params={"username": "mallory"})
        assert visible.json() == "Published"

        listed = client.get("/api/tenders", params={"service_type": ["Construction"]}).json()
        assert [t["id"] for t in listed] == [tender_id]

    def test_stale_version_is_409(self, client, tender_json):
        response = client.put(
            f"/api/tenders/{tender_json['id']}/status",
            params={"status": "Closed", "username": "alice", "version": 5},
        )

        assert response.status_code == 409
        assert response.json() == {"reason": "Version conflict"}

    def test_edit_is_gated(self, client, tender_json):
        forbidden = client.patch(
            f"/api/tenders/{tender_json['id']}/edit",
            params={"username": "mallory"},
            json={"name": "Tunnel"},
        )
        assert forbidden.status_code == 403

        edited = client.patch(
            f"/api/tenders/{tender_json['id']}/edit",
            params={"username": "alice"},
            json={"name": "Tunnel"},
        )
        assert edited.json()["name"] == "Tunnel"
        assert edited.json()["description"] == "Build a bridge"
        assert edited.json()["version"] == 2

    def test_my_tenders(self, client, tender_json):
        mine = client.get("/api/tenders/my", params={"username": "alice"}).json()
        theirs = client.get("/api/tenders/my", params={"username": "mallory"}).json()

        assert [t["name"] for t in mine] == ["Bridge"]
        assert theirs == []

    def test_unknown_tender_is_404(self, client, acme):
        response = client.get(f"/api/tenders/{uuid.uuid4()}/status", params={"username": "alice"})

        assert response.status_code == 404
        assert response.json() == {"reason": "Tender not found"}


class TestBidEndpoints:
    def test_bid_flow(self, client, acme, tender_json):
        created = client.post(
            "/api/bids/new",
            json={
                "name": "Offer",
                "description": "Cheap and fast",
                "tenderId": tender_json["id"],
                "authorType": "User",
                "authorId": acme["alice_id"],
            },
        )
        assert created.status_code == 200
        bid = created.json()
        assert bid["status"] == "Created"
        assert bid["authorId"] == acme["alice_id"]
        assert bid["id"] != acme["alice_id"]

        edited = client.patch(
            f"/api/bids/{bid['id']}/edit",
            params={"username": "alice"},
            json={"name": "X"},
        ).json()
        assert edited["version"] == 2
        assert edited["description"] == "Cheap and fast"

        status = client.get(f"/api/bids/{bid['id']}/status", params={"username": "mallory"})
        assert status.status_code == 403

        listed = client.get(f"/api/bids/{tender_json['id']}/list", params={"username": "alice"}).json()
        assert [b["id"] for b in listed] == [bid["id"]]

    def test_bid_on_unknown_tender(self, client, acme):
        response = client.post(
            "/api/bids/new",
            json={
                "name": "Offer",
                "description": "Cheap and fast",
                "tenderId": str(uuid.uuid4()),
                "authorType": "User",
                "authorId": acme["alice_id"],
            },
        )

        assert response.status_code == 404
        assert response.json() == {"reason": "Tender not found"}

        mine = client.get("/api/bids/my", params={"username": "alice"}).json()
        assert mine == []

    def test_bid_by_unknown_author(self, client, tender_json):
        response = client.post(
            "/api/bids/new",
            json={
                "name": "Offer",
                "description": "Cheap and fast",
                "tenderId": tender_json["id"],
                "authorType": "User",
                "authorId": str(uuid.uuid4()),
            },
        )

        assert response.status_code == 401
