import json
import logging

from fastapi import APIRouter, Request, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from storefront.utils.rate_limit import optional_rate_limit
from storefront.utils.security import get_bearer_token
from .errors import CheckoutError, InvalidRequest, Unauthorized, UpstreamUnavailable
from .models import CheckoutRequest
from . import service as checkout_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/checkout", tags=["Checkout API"])

CHECKOUT_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# module storefront.checkout.views
@router.post("", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def create_checkout(request: Request):
    """
    Crée une session Checkout Stripe à partir du panier du client.
    - En-tête: Authorization: Bearer <access_token Supabase>
    - Entrée JSON: { "items": [ { "id": <int>, "producto": "...", "precio": <num>, "quantity": <int> }, ... ] }
      producto/precio/image_url sont ignorés: le prix vient toujours du catalogue.
    - Réponse: { "url": "<page Stripe>" }
    - Erreurs: { "error": "..." } avec 400 (panier invalide), 401 (auth), 500 (Supabase/Stripe)
    """
    credential = get_bearer_token(request)
    if credential is None:
        raise Unauthorized("Non authentifié")
    try:
        try:
            body = await request.json()
            payload = CheckoutRequest.model_validate(body)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise InvalidRequest("Corps de requête invalide") from e

        session = await run_in_threadpool(
            checkout_service.create_checkout_session,
            credential,
            payload.items,
            request.headers.get("origin"),
        )
        return JSONResponse({"url": session.url}, status_code=200)
    except CheckoutError:
        raise
    except Exception as e:
        logger.exception("Erreur create_checkout")
        raise UpstreamUnavailable(repr(e)) from e
