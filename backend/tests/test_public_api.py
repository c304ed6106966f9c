"""
Tests for the public portfolio HTTP API (no credentials).
"""

import pytest

from portfolio_api.services.domain.owner_directory import (
    get_owner_directory,
    IdentityOwnerDirectory,
)
from portfolio_api.main import app
from tests.conftest import OWNER_ID


PUBLIC = f"/api/public/portfolio/{OWNER_ID}"


@pytest.fixture
def seeded(client, auth_headers):
    client.post(
        "/api/portfolio/projects", json={"title": "Shown", "featured": True}, headers=auth_headers
    )
    client.post("/api/portfolio/projects", json={"title": "Plain"}, headers=auth_headers)
    client.post(
        "/api/portfolio/blog",
        json={"title": "Live post", "content": "x", "published": True},
        headers=auth_headers,
    )
    client.post(
        "/api/portfolio/blog", json={"title": "Draft post", "content": "x"}, headers=auth_headers
    )


class TestPublicPortfolio:
    def test_section_needs_no_credentials(self, client, seeded):
        body = client.get(f"{PUBLIC}/projects").json()
        assert body["total"] == 2

    def test_featured_filter(self, client, seeded):
        body = client.get(f"{PUBLIC}/projects?featured=true").json()
        assert [p["title"] for p in body["items"]] == ["Shown"]

    def test_drafts_are_not_public(self, client, seeded):
        body = client.get(f"{PUBLIC}/blog").json()
        assert [p["title"] for p in body["items"]] == ["Live post"]

        assert client.get(f"{PUBLIC}/blog/live-post").status_code == 200
        assert client.get(f"{PUBLIC}/blog/draft-post").status_code == 404

    def test_hidden_section_returns_empty_page(self, client, seeded, auth_headers):
        client.patch("/api/portfolio/profile", json={"show_projects": False}, headers=auth_headers)

        body = client.get(f"{PUBLIC}/projects").json()
        assert body["items"] == []
        assert body["total"] == 0

    def test_private_portfolio_is_404(self, client, seeded, auth_headers):
        client.patch("/api/portfolio/profile", json={"is_public": False}, headers=auth_headers)

        assert client.get(f"{PUBLIC}/profile").status_code == 404
        assert client.get(PUBLIC).status_code == 404

    def test_full_portfolio(self, client, seeded):
        body = client.get(PUBLIC).json()

        assert body["profile"]["owner_id"] == OWNER_ID
        assert body["profile"]["sections"]["projects"] is True
        assert len(body["projects"]) == 2
        assert [p["title"] for p in body["blog"]] == ["Live post"]

    def test_public_page_size_above_owner_max(self, client, seeded):
        response = client.get(f"{PUBLIC}/projects?limit=500")

        assert response.status_code == 200
        assert response.json()["limit"] == 500

    def test_unknown_handle(self, client):
        class EmptyDirectory:
            def resolve(self, handle):
                return None

        app.dependency_overrides[get_owner_directory] = EmptyDirectory
        try:
            response = client.get("/api/public/portfolio/nobody/profile")
        finally:
            app.dependency_overrides.pop(get_owner_directory)

        assert response.status_code == 404

    def test_custom_directory_resolves_handle(self, client, seeded):
        class HandleDirectory:
            def resolve(self, handle):
                return {"alice": OWNER_ID}.get(handle)

        app.dependency_overrides[get_owner_directory] = HandleDirectory
        try:
            response = client.get("/api/public/portfolio/alice/projects")
        finally:
            app.dependency_overrides.pop(get_owner_directory)

        assert response.status_code == 200
        assert {p["title"] for p in response.json()["items"]} == {"Shown", "Plain"}


class TestIdentityOwnerDirectory:
    def test_handle_is_owner_id(self):
        assert IdentityOwnerDirectory().resolve(" owner-alice ") == "owner-alice"

    def test_blank_handle(self):
        assert IdentityOwnerDirectory().resolve("  ") is None
