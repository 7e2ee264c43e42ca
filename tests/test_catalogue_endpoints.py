from seed.seed import DEMO_USER_EMAIL, DEMO_USER_PASSWORD, DESTINATIONS


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_destinations_empty_before_seed(client):
    r = client.get("/api/destinations")
    assert r.status_code == 200
    assert r.json() == []


def test_destinations_are_ordered_by_name(seeded_client):
    r = seeded_client.get("/api/destinations")
    assert r.status_code == 200
    names = [d["name"] for d in r.json()]
    assert names == sorted(d.name for d in DESTINATIONS)


def test_destination_fields_are_returned_as_stored(seeded_client):
    mara = next(d for d in seeded_client.get("/api/destinations").json() if d["name"].startswith("Maasai"))
    assert mara["price"] == "$56/Ksh 6,000"
    assert set(mara) >= {"id", "name", "image", "description", "reason", "price", "createdAt", "updatedAt"}


def test_get_destination_by_id(seeded_client, destination_id):
    r = seeded_client.get(f"/api/destinations/{destination_id}")
    assert r.status_code == 200
    assert r.json()["id"] == destination_id


def test_get_missing_destination(seeded_client):
    r = seeded_client.get("/api/destinations/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"message": "Destination not found"}


def test_seed_is_idempotent(client):
    for _ in range(2):
        r = client.post("/api/seed")
        assert r.status_code == 200
        assert r.json() == {"message": "Database seeded successfully"}

    assert len(client.get("/api/destinations").json()) == len(DESTINATIONS)

    r = client.post("/api/auth/login", json={"email": DEMO_USER_EMAIL, "password": DEMO_USER_PASSWORD})
    assert r.status_code == 200
    assert r.json()["name"] == "Demo User"


def test_seed_keeps_existing_demo_account(client):
    r = client.post("/api/auth/signup", json={"name": "Mine", "email": DEMO_USER_EMAIL, "password": "changed"})
    assert r.status_code == 200

    assert client.post("/api/seed").status_code == 200
    r = client.post("/api/auth/login", json={"email": DEMO_USER_EMAIL, "password": "changed"})
    assert r.status_code == 200
    assert r.json()["name"] == "Mine"


def test_contact_message_is_stored(client):
    r = client.post(
        "/api/contact",
        json={"name": "Ann", "email": "ann@x.com", "subject": "Safari", "message": "Do you run tours in May?"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Message sent successfully"
    assert body["contactId"]


def test_contact_requires_all_fields(client):
    r = client.post("/api/contact", json={"name": "Ann", "email": "ann@x.com", "subject": "Safari"})
    assert r.status_code == 400
    assert r.json() == {"message": "All fields are required"}


def test_unknown_route_uses_message_body(client):
    r = client.get("/api/nowhere")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}
