"""Integration tests for theme preference endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from httpx import AsyncClient


class TestThemeApi:
    @pytest.mark.asyncio
    async def test_default_is_light(self, client: AsyncClient) -> None:
        resp = await client.get("/api/theme")
        assert resp.status_code == 200
        assert resp.json() == {"theme": "light"}

    @pytest.mark.asyncio
    async def test_client_hint_prefers_dark(self, client: AsyncClient) -> None:
        resp = await client.get("/api/theme", headers={"Sec-CH-Prefers-Color-Scheme": '"dark"'})
        assert resp.json() == {"theme": "dark"}

    @pytest.mark.asyncio
    async def test_cookie_wins_over_hint(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/api/theme",
            headers={"Cookie": "theme=light", "Sec-CH-Prefers-Color-Scheme": "dark"},
        )
        assert resp.json() == {"theme": "light"}

    @pytest.mark.asyncio
    async def test_invalid_cookie_ignored(self, client: AsyncClient) -> None:
        resp = await client.get("/api/theme", headers={"Cookie": "theme=neon"})
        assert resp.json() == {"theme": "light"}

    @pytest.mark.asyncio
    async def test_set_theme_stores_cookie(self, client: AsyncClient) -> None:
        resp = await client.put("/api/theme", json={"theme": "dark"})
        assert resp.status_code == 200
        assert resp.json() == {"theme": "dark"}
        cookie = resp.headers["set-cookie"]
        assert cookie.startswith("theme=dark")
        assert "Max-Age=31536000" in cookie
        assert "SameSite=lax" in cookie

    @pytest.mark.asyncio
    async def test_set_invalid_theme_is_422(self, client: AsyncClient) -> None:
        resp = await client.put("/api/theme", json={"theme": "neon"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_toggle_from_default(self, client: AsyncClient) -> None:
        resp = await client.post("/api/theme/toggle")
        assert resp.json() == {"theme": "dark"}
        assert resp.headers["set-cookie"].startswith("theme=dark")

    @pytest.mark.asyncio
    async def test_toggle_from_saved(self, client: AsyncClient) -> None:
        resp = await client.post("/api/theme/toggle", headers={"Cookie": "theme=dark"})
        assert resp.json() == {"theme": "light"}

    @pytest.mark.asyncio
    async def test_code_stylesheet(self, client: AsyncClient) -> None:
        resp = await client.get("/api/theme/code.css", params={"theme": "dark"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/css")
        assert ".highlight" in resp.text
