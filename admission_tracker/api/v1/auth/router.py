import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi import status as http_status
from fastapi.security import OAuth2PasswordRequestForm

from admission_tracker.auth.dependencies import OPERATOR_SUBJECT, get_credential_verifier
from admission_tracker.auth.providers import CredentialVerifier
from admission_tracker.auth.schemas import LoginRequest, LoginResponse
from admission_tracker.auth.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

INVALID_PASSWORD = "Invalid password"


def _issue_token() -> LoginResponse:
    return LoginResponse(
        access_token=create_access_token(subject={"sub": OPERATOR_SUBJECT}),
        issued_at=datetime.now(timezone.utc),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=http_status.HTTP_200_OK,
)
async def login(
    payload: LoginRequest,
    verifier: CredentialVerifier = Depends(get_credential_verifier),
) -> LoginResponse:
    if not verifier.verify_credentials(payload.password):
        logger.warning("Rejected login attempt")
        raise HTTPException(status_code=http_status.HTTP_401_UNAUTHORIZED, detail=INVALID_PASSWORD)
    return _issue_token()


@router.post("/login-oauth")
async def login_oauth(
    form_data: OAuth2PasswordRequestForm = Depends(),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """OAuth2 password form for the interactive docs; the username is ignored."""
    if not verifier.verify_credentials(form_data.password):
        raise HTTPException(status_code=http_status.HTTP_401_UNAUTHORIZED, detail=INVALID_PASSWORD)
    result = _issue_token()
    return {
        "access_token": result.access_token,
        "token_type": "bearer",
    }
