"""Tests for API endpoints."""

import pytest


@pytest.mark.asyncio
class TestAPIEndpoints:
    """Test API endpoints."""
    
    async def test_list_urls_requires_login(self, client):
        response = await client.get("/api/urls")
        
        assert response.status_code == 401
        assert "log in" in response.json()["detail"]
    
    async def test_list_urls(self, client, register_user, sample_urls):
        await register_user(client, "a@x.com")
        create = await client.post("/urls", data={"long_url": sample_urls[0]})
        short_id = create.headers["location"].rsplit("/", 1)[-1]
        
        response = await client.get("/api/urls")
        
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["short_id"] == short_id
        assert data[0]["long_url"] == sample_urls[0]
        assert data[0]["short_url"] == f"http://testserver/u/{short_id}"
        assert data[0]["total_visits"] == 0
    
    async def test_url_stats(self, client, other_client, register_user, sample_urls):
        await register_user(client, "a@x.com")
        create = await client.post("/urls", data={"long_url": sample_urls[0]})
        short_id = create.headers["location"].rsplit("/", 1)[-1]
        
        await other_client.get(f"/u/{short_id}")
        await other_client.get(f"/u/{short_id}")
        await client.get(f"/u/{short_id}")
        
        response = await client.get(f"/api/urls/{short_id}")
        
        assert response.status_code == 200
        data = response.json()
        assert data["total_visits"] == 3
        assert data["unique_visits"] == 2
        assert len(data["visits"]) == 3
    
    async def test_url_stats_not_found(self, client, register_user):
        await register_user(client, "a@x.com")
        
        response = await client.get("/api/urls/nope00")
        
        assert response.status_code == 404
        assert response.json() == {"detail": "Short URL 'nope00' does not exist."}
    
    async def test_url_stats_forbidden(self, client, other_client, register_user, sample_urls):
        await register_user(client, "a@x.com")
        create = await client.post("/urls", data={"long_url": sample_urls[0]})
        short_id = create.headers["location"].rsplit("/", 1)[-1]
        await register_user(other_client, "b@x.com")
        
        response = await other_client.get(f"/api/urls/{short_id}")
        
        assert response.status_code == 403
    
    async def test_forwarded_headers_shape_short_url(self, client, register_user, sample_urls):
        await register_user(client, "a@x.com")
        await client.post("/urls", data={"long_url": sample_urls[0]})
        
        response = await client.get("/api/urls", headers={
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "tiny.example.com",
            "X-Forwarded-Prefix": "/tiny",
        })
        
        assert response.json()[0]["short_url"].startswith("https://tiny.example.com/tiny/u/")
    
    async def test_health_check(self, client):
        response = await client.get("/api/health")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["registries"] == "healthy"
    
    async def test_statistics(self, client, register_user):
        await register_user(client, "a@x.com")
        
        response = await client.get("/api/stats")
        
        assert response.status_code == 200
        data = response.json()
        assert data["total_accounts"] == 1
        assert data["total_links"] == 0
        assert data["total_visits"] == 0
