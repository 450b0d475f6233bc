"""Session Route — public login that registers unknown usernames.

Invariants:
    - No Authorization header required
    - Always 201 with {"identifier": n}, for new and returning users alike
"""

from fastapi import APIRouter, Depends, status

from wasaphoto.api.dependencies import get_account_service
from wasaphoto.schemas.user import IdentifierResponse, UsernameBody
from wasaphoto.services.account_service import AccountService

router = APIRouter(prefix="/api/v1", tags=["session"])


@router.post(
    "/session", response_model=IdentifierResponse,
    status_code=status.HTTP_201_CREATED,
)
async def do_login(
    body: UsernameBody,
    accounts: AccountService = Depends(get_account_service),
):
    """Log in (or register) by username and return the bearer identifier."""
    user_id = await accounts.login(body.name)
    return IdentifierResponse(identifier=user_id)
