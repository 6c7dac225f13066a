"""Tests for the in-memory account registry."""

import asyncio

import pytest

from tinyapp.passwords import PasswordHasher
from tinyapp.registry import InMemoryAccountRegistry
from tinyapp.registry.accounts import normalize_email
from tinyapp.results import ErrorKind


@pytest.mark.asyncio
class TestAccountRegistry:
    """Test registration, lookup and credential checks."""
    
    async def test_register_and_find(self, accounts):
        result = await accounts.register("user1@example.com", "blue-bunny-feathers")
        
        assert result.ok
        account = await accounts.find_by_email("user1@example.com")
        assert account.account_id == result.value
        assert account.email == "user1@example.com"
        assert await accounts.get(result.value) is account
    
    async def test_find_unknown_email_returns_none(self, accounts):
        await accounts.register("user1@example.com", "blue-bunny-feathers")
        
        assert await accounts.find_by_email("user3@example.com") is None
        assert await accounts.find_by_email("") is None
    
    async def test_password_is_not_stored_in_plaintext(self, accounts):
        await accounts.register("user1@example.com", "blue-bunny-feathers")
        
        account = await accounts.find_by_email("user1@example.com")
        assert account.password_hash != "blue-bunny-feathers"
        assert account.password_hash.startswith("$2")
    
    async def test_duplicate_email_conflicts(self, accounts):
        first = await accounts.register("user1@example.com", "pw1")
        stored = await accounts.find_by_email("user1@example.com")
        original_hash = stored.password_hash
        
        second = await accounts.register("user1@example.com", "other")
        
        assert second.error is ErrorKind.CONFLICT
        account = await accounts.find_by_email("user1@example.com")
        assert account.account_id == first.value
        assert account.password_hash == original_hash
        assert await accounts.count() == 1
    
    async def test_email_comparison_ignores_case_and_whitespace(self, accounts):
        await accounts.register("User1@Example.com", "pw1")
        
        duplicate = await accounts.register("  user1@example.COM ", "pw2")
        
        assert duplicate.error is ErrorKind.CONFLICT
        assert (await accounts.find_by_email("USER1@example.com")) is not None
    
    @pytest.mark.parametrize("email,password", [
        ("", "pw1"),
        ("   ", "pw1"),
        ("user@example.com", ""),
        ("user@example.com", "   "),
        (None, "pw1"),
    ])
    async def test_blank_fields_conflict(self, accounts, email, password):
        result = await accounts.register(email, password)
        
        assert result.error is ErrorKind.CONFLICT
        assert await accounts.count() == 0
    
    async def test_verify_credentials(self, accounts):
        registered = await accounts.register("a@x.com", "pw1")
        
        result = await accounts.verify_credentials("a@x.com", "pw1")
        
        assert result.ok
        assert result.value == registered.value
    
    async def test_wrong_password_and_unknown_email_look_the_same(self, accounts):
        await accounts.register("a@x.com", "pw1")
        
        wrong_password = await accounts.verify_credentials("a@x.com", "nope")
        unknown_email = await accounts.verify_credentials("b@x.com", "pw1")
        
        assert wrong_password == unknown_email
        assert wrong_password.error is ErrorKind.INVALID
        assert wrong_password.value is None
    
    async def test_empty_password_is_invalid(self, accounts):
        await accounts.register("a@x.com", "pw1")
        
        result = await accounts.verify_credentials("a@x.com", "")
        assert result.error is ErrorKind.INVALID
    
    async def test_account_id_collision_is_retried(self, hasher, sequence_generator):
        registry = InMemoryAccountRegistry(
            hasher=hasher,
            generator=sequence_generator(["user01", "user01", "user02"]),
        )
        
        first = await registry.register("a@x.com", "pw1")
        second = await registry.register("b@x.com", "pw2")
        
        assert first.value == "user01"
        assert second.value == "user02"
    
    async def test_hashing_does_not_block_the_event_loop(self, short_code_generator):
        registry = InMemoryAccountRegistry(
            hasher=PasswordHasher(rounds=12),
            generator=short_code_generator,
        )
        gaps = []
        
        async def ticker():
            loop = asyncio.get_running_loop()
            last = loop.time()
            while True:
                await asyncio.sleep(0.005)
                now = loop.time()
                gaps.append(now - last)
                last = now
        
        task = asyncio.create_task(ticker())
        try:
            registered = await registry.register("a@x.com", "pw1")
            verified = await registry.verify_credentials("a@x.com", "pw1")
            unknown = await registry.verify_credentials("b@x.com", "pw1")
        finally:
            task.cancel()
        
        assert registered.ok
        assert verified.value == registered.value
        assert unknown.error is ErrorKind.INVALID
        assert gaps
        assert max(gaps) < 0.1
    
    async def test_concurrent_registrations_of_one_email(self, accounts):
        results = await asyncio.gather(
            accounts.register("a@x.com", "pw1"),
            accounts.register("A@x.com ", "pw2"),
        )
        
        assert sorted(r.ok for r in results) == [False, True]
        assert [r.error for r in results if not r.ok] == [ErrorKind.CONFLICT]
        assert await accounts.count() == 1


def test_normalize_email():
    assert normalize_email("  A@X.com ") == "a@x.com"
    assert normalize_email(None) == ""
