"""End-to-end tests for TinyApp."""

import pytest
from httpx import ASGITransport, AsyncClient

from app import build_service
from config import Config
from tinyapp.results import ErrorKind
from web_app import create_app


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests."""
    
    async def test_registry_lifecycle(self, service):
        """Register, shorten, visit from two browsers, delete."""
        account = await service.register("a@x.com", "pw1")
        assert account.ok
        owner = account.value
        
        short_id = await service.create_link("http://example.com", owner)
        
        result = await service.visit(short_id, "v1")
        assert result.value == "http://example.com"
        link = await service.get_link(short_id)
        assert (link.total_visits, link.unique_visits) == (1, 1)
        
        await service.visit(short_id, "v1")
        assert (link.total_visits, link.unique_visits) == (2, 1)
        
        await service.visit(short_id, "v2")
        assert (link.total_visits, link.unique_visits) == (3, 2)
        
        assert (await service.delete_link(short_id, owner)).ok
        assert await service.get_link(short_id) is None
        assert (await service.visit(short_id, "v1")).error is ErrorKind.NOT_FOUND
    
    async def test_full_http_lifecycle(self, logger):
        """Same lifecycle driven through the web app as built by app.py."""
        config = Config(
            base_url="http://testserver",
            session_secret_key="integration-secret",
            bcrypt_rounds=4,
        )
        service = build_service(config, logger)
        app = create_app(service_instance=service, config=config, logger=logger)
        transport = ASGITransport(app=app)
        
        async with AsyncClient(transport=transport, base_url="http://testserver") as owner, \
                AsyncClient(transport=transport, base_url="http://testserver") as visitor:
            # 1. Register
            response = await owner.post("/register", data={"email": "a@x.com", "password": "pw1"})
            assert response.status_code == 303
            
            # 2. Shorten
            response = await owner.post("/urls", data={"long_url": "http://example.com"})
            short_id = response.headers["location"].rsplit("/", 1)[-1]
            
            # 3. Visit twice from one browser, once from another
            for client in (owner, owner, visitor):
                response = await client.get(f"/u/{short_id}")
                assert response.status_code == 302
                assert response.headers["location"] == "http://example.com"
            
            stats = (await owner.get(f"/api/urls/{short_id}")).json()
            assert stats["total_visits"] == 3
            assert stats["unique_visits"] == 2
            
            # 4. Visitor cannot delete, owner can
            assert (await visitor.post(f"/urls/{short_id}?_method=DELETE")).status_code == 401
            assert (await owner.post(f"/urls/{short_id}?_method=DELETE")).status_code == 303
            assert (await visitor.get(f"/u/{short_id}")).status_code == 404
        
        await service.close()
    
    async def test_seeded_demo_links(self, service, client):
        await service.seed_demo_data()
        
        response = await client.get("/u/b2xVn2")
        
        assert response.status_code == 302
        assert response.headers["location"] == "http://www.lighthouselabs.ca"
