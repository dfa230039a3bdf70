import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # malformed hash, or a password over bcrypt's 72-byte limit
        return False


class TokenService:
    """
    Issues and checks signed bearer tokens.

    A token binds a subject (the user's email) to an absolute expiry. The
    signing key is fixed for the lifetime of the instance.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire: timedelta = timedelta(days=7),
    ):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire = expire

    def issue(self, subject: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self._expire,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def _decode(self, token: str, verify_exp: bool) -> dict:
        return jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"verify_exp": verify_exp, "require": ["sub", "exp"]},
        )

    def extract_claims(self, token: str) -> dict | None:
        """Signature-checked claims, expired tokens included. None if malformed."""
        try:
            return self._decode(token, verify_exp=False)
        except Exception as exc:
            logger.debug("Could not read token claims: %s", exc)
            return None

    def extract_subject(self, token: str) -> str | None:
        claims = self.extract_claims(token)
        if claims is None:
            return None
        return claims.get("sub")

    def extract_expiration(self, token: str) -> datetime | None:
        claims = self.extract_claims(token)
        if claims is None:
            return None
        return datetime.fromtimestamp(claims["exp"], tz=timezone.utc)

    def validate(self, token: str, expected_subject: str) -> bool:
        try:
            claims = self._decode(token, verify_exp=True)
        except jwt.ExpiredSignatureError:
            logger.debug("Token expired for %s", expected_subject)
            return False
        except Exception as exc:
            logger.debug("Invalid token for %s: %s", expected_subject, exc)
            return False
        return claims.get("sub") == expected_subject
