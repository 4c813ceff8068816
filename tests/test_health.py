def test_health_is_fixed_and_idempotent(client, provider):
    bodies = [client.get("/api/health") for _ in range(3)]

    assert all(r.status_code == 200 for r in bodies)
    assert all(r.json() == {"status": "ok", "message": "Server is running"} for r in bodies)
    assert provider.calls == []
