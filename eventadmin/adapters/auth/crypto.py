from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

DEFAULT_WORK_FACTOR = 10


class Argon2PasswordHasher:
    """Argon2id hashing; the work factor maps to the Argon2 time cost."""

    def __init__(
        self,
        work_factor: int = DEFAULT_WORK_FACTOR,
        memory_cost: int = 65536,
        parallelism: int = 4,
        hash_len: int = 32,
    ) -> None:
        if work_factor < 1:
            raise ValueError("work_factor must be >= 1")
        self.work_factor = work_factor
        self.ph = PasswordHasher(
            time_cost=work_factor,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=hash_len,
        )

    def hash_password(self, password: str) -> str:
        return str(self.ph.hash(password))

    def verify_password(self, password: str, hash_str: str) -> bool:
        try:
            self.ph.verify(hash_str, password)
            return True
        except (VerificationError, InvalidHashError):
            return False
