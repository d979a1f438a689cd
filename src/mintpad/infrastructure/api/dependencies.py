"""FastAPI dependencies for caller identity.

Wallet signatures are verified upstream (gateway or signing middleware); by
the time a request reaches these routes the wallet header is trusted. The
dependency turns it into an explicit AuthContext for the domain services.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from mintpad.core.config import get_settings
from mintpad.core.logging import get_logger
from mintpad.domain.entities import AuthContext, normalize_address

logger = get_logger(__name__)


def get_auth_context(request: Request) -> AuthContext:
    """Build the AuthContext for the current request.

    Anonymous callers get an unauthenticated context rather than an error;
    routes that need a wallet use ``get_authenticated_context``.
    """
    settings = get_settings()
    wallet = request.headers.get(settings.wallet_header)
    if not wallet or not wallet.strip():
        return AuthContext.anonymous()

    wallet = normalize_address(wallet)
    admins = {normalize_address(a) for a in settings.admin_wallets}
    return AuthContext(wallet_address=wallet, is_admin=wallet in admins)


def get_authenticated_context(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
) -> AuthContext:
    """Require a wallet on the request.

    Raises:
        HTTPException: 401 if no wallet header was sent.
    """
    if not auth.is_authenticated:
        logger.info("Authentication failed: missing wallet header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Wallet address required",
        )
    return auth


Auth = Annotated[AuthContext, Depends(get_auth_context)]
AuthenticatedWallet = Annotated[AuthContext, Depends(get_authenticated_context)]
