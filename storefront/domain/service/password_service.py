"""Password hashing domain service."""

import asyncio

from storefront.config import AuthSettings
from storefront.util.password import hash_password, verify_password


class PasswordService:
    """Hashes and checks local passwords.

    bcrypt is CPU-bound, so both operations run in a worker thread.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.rounds = auth_settings.bcrypt_rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(hash_password, password, self.rounds)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(verify_password, password, password_hash)
