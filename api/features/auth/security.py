"""Password hashing with bcrypt."""
import asyncio

import bcrypt

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing with a fixed cost factor.

    Hashing is CPU bound, so both operations run in a worker thread to keep the
    event loop responsive.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    @staticmethod
    def fits(password: str) -> bool:
        return len(password.encode("utf-8")) <= BCRYPT_MAX_PASSWORD_BYTES

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        if not self.fits(password):
            return False
        return await asyncio.to_thread(self._verify, password, password_hash)
