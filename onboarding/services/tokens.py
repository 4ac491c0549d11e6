import hashlib
import logging
import time
from typing import Any, Dict

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from jose import JWTError, jwk, jwt

from onboarding.core.config import Settings
from onboarding.core.errors import InvalidSessionError
from onboarding.models.user import User

logger = logging.getLogger(__name__)


def generate_private_key_pem() -> str:
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


class TokenIssuer:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.algorithm = settings.ALGORITHM
        self.issuer = settings.PUBLIC_URL.rstrip("/")

        private_pem = settings.JWT_PRIVATE_KEY.replace("\\n", "\n")
        if not private_pem:
            logger.warning("JWT_PRIVATE_KEY not set, generating an ephemeral signing key")
            private_pem = generate_private_key_pem()
        self._private_pem = private_pem

        private_key = serialization.load_pem_private_key(private_pem.encode("ascii"), password=None)
        public_der = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        self._public_pem = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("ascii")
        self.key_id = hashlib.sha256(public_der).hexdigest()[:16]

    def issue(self, user: User) -> str:
        now = int(time.time())
        claims = {
            "iss": self.issuer,
            "sub": user.user_key,
            "aud": self.settings.TOKEN_AUDIENCE,
            "iat": now,
            "exp": now + self.settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            "email": user.email,
            "role": user.role.value,
        }
        return jwt.encode(
            claims,
            self._private_pem,
            algorithm=self.algorithm,
            headers={"kid": self.key_id},
        )

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._public_pem,
                algorithms=[self.algorithm],
                audience=self.settings.TOKEN_AUDIENCE,
                issuer=self.issuer,
            )
        except JWTError:
            raise InvalidSessionError("Invalid token")

    def openid_configuration(self) -> Dict[str, Any]:
        return {
            "issuer": self.issuer,
            "jwks_uri": f"{self.issuer}/.well-known/jwks.json",
            "authorization_endpoint": f"{self.issuer}/oauth/authorize",
            "response_types_supported": ["id_token"],
            "subject_types_supported": ["public"],
            "id_token_signing_alg_values_supported": [self.algorithm],
        }

    def jwks(self) -> Dict[str, Any]:
        public_jwk = jwk.construct(self._public_pem, self.algorithm).to_dict()
        public_jwk.update({"use": "sig", "kid": self.key_id, "alg": self.algorithm})
        return {"keys": [public_jwk]}
