# tests/test_api.py
"""Tests for the REST API."""

import pytest
from httpx import AsyncClient, ASGITransport

from manuals_search.api.main import create_app
from manuals_search.api.dependencies import get_config, get_folder_walker
from manuals_search.config import Config, DriveConfig
from manuals_search.errors import DriveAPIError
from manuals_search.library.walker import FolderWalker

from drive_fakes import FakeDrive, folder, pdf


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def configured():
    """Config with both required Drive settings present."""
    return Config(drive=DriveConfig(service_key='{"type": "service_account"}', folder_id="root"))


@pytest.fixture
def tagged_tree():
    return {
        "root": [folder("cat", "Refrigeration"), pdf("loose", None)],
        "cat": [folder("brand", "Hussmann")],
        "brand": [
            pdf("m1", "Excel Case.pdf", "https://drive.google.com/file/d/m1/view?usp=drivesdk"),
            pdf("m2", "Protocol Rack.pdf"),
            pdf("m3", "Impact Cases.pdf"),
            pdf("m4", "Service Bulletin.pdf"),
        ],
    }


def _make_client(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def client(configured, tagged_tree):
    """Client for an app whose walker reads from an in-memory tree."""
    app = create_app(configured)
    app.dependency_overrides[get_config] = lambda: configured
    app.dependency_overrides[get_folder_walker] = lambda: FolderWalker(FakeDrive(tagged_tree))

    async with _make_client(app) as client:
        yield client


# =============================================================================
# Manuals
# =============================================================================


@pytest.mark.asyncio
async def test_list_manuals(client):
    response = await client.get("/api/manuals")

    assert response.status_code == 200
    assert response.headers["cache-control"] == "no-store"

    data = response.json()
    assert [m["id"] for m in data] == ["m1", "m2", "m3", "m4", "loose"]

    first = data[0]
    assert first == {
        "id": "m1",
        "title": "Excel Case.pdf",
        "url": "https://drive.google.com/file/d/m1/view?usp=drivesdk",
        "path": ["Refrigeration", "Hussmann"],
        "brand": "Hussmann",
        "category": "Refrigeration",
        "tags": [],
    }


@pytest.mark.asyncio
async def test_root_level_manual_has_fallbacks_and_no_taxonomy(client):
    data = (await client.get("/api/manuals")).json()

    loose = next(m for m in data if m["id"] == "loose")
    assert loose["title"] == "Untitled"
    assert loose["url"] == "https://drive.google.com/file/d/loose/view"
    assert loose["path"] == []
    assert "brand" not in loose
    assert "category" not in loose


@pytest.mark.asyncio
async def test_query_filters_results(client):
    response = await client.get("/api/manuals", params={"q": "CASE"})

    assert response.status_code == 200
    assert [m["id"] for m in response.json()] == ["m1", "m3"]


@pytest.mark.asyncio
async def test_query_matches_brand(client):
    response = await client.get("/api/manuals", params={"q": "hussmann"})

    assert len(response.json()) == 4


@pytest.mark.asyncio
async def test_debug_returns_diagnostics(client):
    response = await client.get("/api/manuals", params={"debug": "1"})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 5
    assert [m["id"] for m in data["sample"]] == ["m1", "m2", "m3"]
    assert data["envPresent"] == {
        "GOOGLE_SERVICE_KEY": True,
        "GOOGLE_DRIVE_FOLDER_ID": True,
    }


@pytest.mark.asyncio
async def test_debug_other_values_return_list(client):
    response = await client.get("/api/manuals", params={"debug": "0"})

    assert isinstance(response.json(), list)


# =============================================================================
# Errors
# =============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("drive", [
    DriveConfig(),
    DriveConfig(service_key='{"type": "service_account"}'),
    DriveConfig(folder_id="root"),
])
async def test_missing_configuration_returns_fixed_500(drive):
    config = Config(drive=drive)
    app = create_app(config)
    app.dependency_overrides[get_config] = lambda: config

    async with _make_client(app) as client:
        response = await client.get("/api/manuals")

    assert response.status_code == 500
    assert response.json() == {"error": "Missing GOOGLE_SERVICE_KEY or GOOGLE_DRIVE_FOLDER_ID"}


@pytest.mark.asyncio
async def test_unparseable_credential_returns_500():
    config = Config(drive=DriveConfig(service_key="not-json", folder_id="root"))
    app = create_app(config)
    app.dependency_overrides[get_config] = lambda: config

    async with _make_client(app) as client:
        response = await client.get("/api/manuals")

    assert response.status_code == 500
    assert response.json()["error"].startswith("Invalid GOOGLE_SERVICE_KEY")


@pytest.mark.asyncio
async def test_drive_failure_returns_500_without_partial_results(configured, tagged_tree):
    drive = FakeDrive(tagged_tree, fail_on="brand", error=DriveAPIError("Rate limit exceeded", 429))
    app = create_app(configured)
    app.dependency_overrides[get_config] = lambda: configured
    app.dependency_overrides[get_folder_walker] = lambda: FolderWalker(drive)

    async with _make_client(app) as client:
        response = await client.get("/api/manuals")

    assert response.status_code == 500
    assert response.json() == {"error": "Rate limit exceeded"}


@pytest.mark.asyncio
async def test_error_without_message_uses_fallback(configured, tagged_tree):
    drive = FakeDrive(tagged_tree, fail_on="root", error=RuntimeError())
    app = create_app(configured)
    app.dependency_overrides[get_config] = lambda: configured
    app.dependency_overrides[get_folder_walker] = lambda: FolderWalker(drive)

    async with _make_client(app) as client:
        response = await client.get("/api/manuals")

    assert response.status_code == 500
    assert response.json() == {"error": "Unknown error"}


# =============================================================================
# Service endpoints
# =============================================================================


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "version" in response.json()


@pytest.mark.asyncio
async def test_api_root(client):
    response = await client.get("/api")

    assert response.status_code == 200
    assert response.json()["endpoints"]["manuals"] == "/api/manuals"


@pytest.mark.asyncio
async def test_search_page(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Manuals Search" in response.text
    assert 'fetch("/api/manuals")' in response.text
