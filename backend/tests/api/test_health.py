"""Health probes, CORS policy and removed endpoints."""


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client):
    from secureboard.main import app
    app.state.db_manager = None

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_cors_allows_configured_origin(client):
    res = await client.options(
        "/comments",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert res.headers.get("access-control-allow-origin") == "http://localhost:3000"


async def test_cors_rejects_other_origins(client):
    res = await client.get("/comments", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in res.headers


async def test_free_form_query_endpoint_does_not_exist(client):
    res = await client.post("/query", content="SELECT * FROM users")
    assert res.status_code in (404, 405)
