"""Password hashing with bcrypt."""

import bcrypt


# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Salted one-way password hashes."""
    
    def __init__(self, rounds: int = 12):
        """Initialize hasher.
        
        Args:
            rounds: bcrypt cost factor (4-31)
        """
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self.rounds = rounds
        # Compared against by burn()
        self._dummy_hash = self.hash("not-a-real-password")
    
    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    
    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        hashed = bcrypt.hashpw(self._encode(password), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("ascii")
    
    def verify(self, password: str, hashed: str) -> bool:
        """Check a password against a stored hash."""
        try:
            return bcrypt.checkpw(self._encode(password), hashed.encode("ascii"))
        except ValueError:
            # Malformed stored hash
            return False
    
    def burn(self, password: str) -> None:
        """Spend the same work as ``verify`` without a real hash to compare."""
        self.verify(password, self._dummy_hash)
