"""
Middlewares transverses de l’application.
- register_basic_middlewares: CORS, TrustedHost et confiance en X-Forwarded-*.
- register_security_middleware: en-têtes de sécurité de base.
- register_checkout_cors_middleware: preflight et en-têtes CORS du checkout.
"""
from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from storefront.config import CORS_ORIGINS, ALLOWED_HOSTS
from storefront.checkout.views import CHECKOUT_CORS_HEADERS, router as checkout_router

CHECKOUT_PATH = checkout_router.prefix

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

def register_basic_middlewares(app: FastAPI) -> None:
    """
    Ajoute les middlewares « de base »:
    - CORSMiddleware: toutes origines par défaut, en-têtes attendus par le client Supabase.
    - TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
    - ProxyHeadersMiddleware: fait confiance aux en-têtes du proxy (x-forwarded-*).
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=ALLOWED_HOSTS + ["*"] if "*" in CORS_ORIGINS else ALLOWED_HOSTS,
    )
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response

def register_checkout_cors_middleware(app: FastAPI) -> None:
    """
    CORS permissif du checkout, appliqué hors CORSMiddleware global:
    - OPTIONS: réponse 200 sans corps, sans authentification.
    - Autres méthodes: en-têtes CORS posés sur toute réponse (succès, 4xx, 5xx, 429).
    - Ajouté en dernier afin qu’il s’exécute en premier dans la pile des middlewares.
    """
    @app.middleware("http")
    async def checkout_cors(request: Request, call_next):
        if not request.url.path.rstrip("/").startswith(CHECKOUT_PATH):
            return await call_next(request)
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CHECKOUT_CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CHECKOUT_CORS_HEADERS)
        return response
