"""
Gestionnaires d’exceptions.
- CheckoutError -> {"error": "..."} (le front lit la clé 'error').
  Le client reçoit exc.message; exc.detail (diagnostic) reste dans les logs.
- Les autres routers gardent la convention HTTPException -> {"detail": ...} de FastAPI.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.checkout.errors import CheckoutError, InvalidRequest

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    """
    Enregistre les handlers de la frontière HTTP.
    - Les erreurs checkout sont résolues ici: aucun état partiel n'existe à annuler.
    """
    @app.exception_handler(CheckoutError)
    async def checkout_error_handler(request: Request, exc: CheckoutError):
        if isinstance(exc, InvalidRequest):
            logger.warning("checkout rejected path=%s detail=%s", request.url.path, exc.detail)
        else:
            logger.info("checkout failed path=%s status=%s detail=%s", request.url.path, exc.status_code, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})