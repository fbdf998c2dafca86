"""
Basic grantstore usage example.

This example demonstrates the fundamental grant store operations:
- Creating a backend from configuration
- Issuing and reading a reference token
- Rotating a one-time-use refresh token
- Revoking everything a user holds for a client on logout
"""

import asyncio
from datetime import timedelta

from grantstore import (
    Claim,
    PersistedGrantFilter,
    RefreshToken,
    RefreshTokenStore,
    ReferenceTokenStore,
    StoreConfig,
    Token,
    create_persisted_grant_store,
)
from grantstore.common.utils import get_current_time
from grantstore.grants import create_handle_generation_service


async def basic_example():
    """Demonstrate basic grant store usage"""
    print("Basic grantstore Example")
    print("=" * 30)

    # 1. Create backend and stores
    config = StoreConfig.from_env()
    backend = create_persisted_grant_store(config)
    handles = create_handle_generation_service(config)

    reference_tokens = ReferenceTokenStore(backend, handle_generation_service=handles)
    refresh_tokens = RefreshTokenStore(backend, handle_generation_service=handles)
    print("✓ Created grant stores")

    # 2. Issue a reference token
    token = Token(
        client_id="app1",
        lifetime=3600,
        claims=[Claim("sub", "alice"), Claim("sid", "session-1"), Claim("scope", "api1")],
    )
    handle = await reference_tokens.store_reference_token(token)
    print(f"✓ Reference token issued: {handle[:20]}...")

    # 3. Introspect it; expiration is enforced by the caller
    stored = await reference_tokens.get_reference_token(handle)
    if stored is not None and stored.expiration > get_current_time():
        print(f"✓ Token active for scopes: {stored.scopes}")

    # 4. Issue and consume a refresh token
    refresh_token = RefreshToken(access_token=token)
    refresh_handle = await refresh_tokens.store_refresh_token(refresh_token)
    refresh_token.consumed_time = get_current_time()
    await refresh_tokens.update_refresh_token(refresh_handle, refresh_token)
    print("✓ Refresh token marked as consumed")

    # 5. Logout: revoke every grant alice holds for app1
    await reference_tokens.remove_reference_tokens("alice", "app1")
    await refresh_tokens.remove_refresh_tokens("alice", "app1")

    remaining = await backend.get_all(PersistedGrantFilter(subject_id="alice"))
    print(f"✓ Grants left for alice: {len(remaining)}")

    # 6. A removed handle reads as absent
    assert await reference_tokens.get_reference_token(handle) is None
    print(f"✓ Token lifetime was {timedelta(seconds=token.lifetime)}")


if __name__ == "__main__":
    asyncio.run(basic_example())
