from datenorm.normalization.date_formats import DATE_FORMATS


def test_health_endpoint_returns_ok(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "service" in body
    assert "version" in body
    assert body["environment"] == "test"


def test_health_reports_loaded_formats(client):
    body = client.get("/health").json()

    assert body["accepted_formats"] == len(DATE_FORMATS) == 4
