from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from admission_tracker.auth.providers import CredentialVerifier, SharedPasswordVerifier
from admission_tracker.auth.schemas import OperatorSession
from admission_tracker.auth.security import decode_access_token
from admission_tracker.core.config import settings

OPERATOR_SUBJECT = "operator"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login-oauth")


def get_credential_verifier() -> CredentialVerifier:
    return SharedPasswordVerifier(settings.access_password_hash)


async def require_operator(token: str = Depends(oauth2_scheme)) -> OperatorSession:
    """Resolve the caller from the bearer token issued at login."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    payload = decode_access_token(token)
    if not payload:
        raise credentials_exception
    subject = payload.get("sub")
    if subject != OPERATOR_SUBJECT:
        raise credentials_exception
    return OperatorSession(subject=subject)
