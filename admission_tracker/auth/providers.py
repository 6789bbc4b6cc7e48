"""
Credential verification. The service is gated by a single operator password; the check
lives behind CredentialVerifier so an identity provider can replace it without touching
the routers.
"""

from abc import ABC, abstractmethod

from admission_tracker.auth.security import verify_password


class CredentialVerifier(ABC):
    @abstractmethod
    def verify_credentials(self, secret: str) -> bool:
        ...


class SharedPasswordVerifier(CredentialVerifier):
    """Compares the submitted password against one configured bcrypt hash."""

    def __init__(self, password_hash: str) -> None:
        self.password_hash = password_hash

    def verify_credentials(self, secret: str) -> bool:
        if not secret or not self.password_hash:
            return False
        return verify_password(secret, self.password_hash)
