"""
Factory d’application recommandée pour les entrypoints (ex: storefront.asgi).
Ordonne les étapes d’initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares, register_security_middleware, register_checkout_cors_middleware
from .exceptions import register_exception_handlers
from .routers import register_routers

def create_app() -> FastAPI:
    """
    Construit l’app FastAPI avec le lifespan et enregistre:
      - middlewares de base, sécurité, CORS du checkout (en dernier: exécuté en premier)
      - gestionnaires d’exceptions
      - tous les routers (catalogue, checkout, admin, health)
    """
    app = FastAPI(title="Storefront", lifespan=lifespan)
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_checkout_cors_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
