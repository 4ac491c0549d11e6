from fastapi import APIRouter, Depends

from onboarding.api.deps import get_token_issuer
from onboarding.services.tokens import TokenIssuer

router = APIRouter(prefix="/.well-known", tags=["Discovery"])


@router.get("/openid-configuration")
async def openid_configuration(issuer: TokenIssuer = Depends(get_token_issuer)):
    return issuer.openid_configuration()


@router.get("/jwks.json")
async def jwks(issuer: TokenIssuer = Depends(get_token_issuer)):
    return issuer.jwks()
