from httpx import ASGITransport, AsyncClient

from starledger.core.container import ApplicationContainer
from starledger.main import create_app


async def test_app_holds_container_built_from_settings(settings):
    app = create_app(settings)
    container = app.state.container

    assert isinstance(container, ApplicationContainer)
    assert container.settings is settings
    assert str(container.engine.url) == settings.database_url
    await container.dispose()


async def test_lifespan_creates_schema_in_test_environment(settings):
    app = create_app(settings)

    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            res = await client.post("/api/uid8", json={"telegram_id": "1"})

    assert res.status_code == 200


async def test_openapi_documents_error_envelope(settings):
    app = create_app(settings)
    schema = app.openapi()

    assert set(schema["components"]["schemas"]["ErrorResponse"]["properties"]) == {"ok", "error", "message"}
    allocate = schema["paths"]["/api/uid8"]["post"]["responses"]
    assert {"400", "500", "503"} <= set(allocate)
    deposit = schema["paths"]["/api/cli/add-stars"]["post"]["responses"]
    assert deposit["401"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/ErrorResponse"
    }
    assert "401" not in schema["paths"]["/api/user-balance"]["get"]["responses"]
    await app.state.container.dispose()
