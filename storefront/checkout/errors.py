"""
Erreurs du checkout, résolues à la frontière HTTP (aucune saga à annuler: rien n'est persisté localement).
- InvalidRequest: panier vide, produit inconnu, corps malformé (400)
- Unauthorized: identifiant absent ou invalide (401)
- UpstreamUnavailable: Supabase ou Stripe injoignable, en erreur ou hors délai (500)

message: texte renvoyé au client. detail: diagnostic réservé aux logs (id fautif, exception interne...).
"""
from typing import Optional


class CheckoutError(Exception):
    status_code = 500
    message = "Le paiement n'a pas pu être traité, réessayez"

    def __init__(self, detail: Optional[str] = None, message: Optional[str] = None):
        super().__init__(detail or message or self.message)
        if message:
            self.message = message
        self.detail = detail or self.message


class InvalidRequest(CheckoutError):
    status_code = 400


class Unauthorized(CheckoutError):
    status_code = 401
    message = "Veuillez vous connecter pour payer"


class UpstreamUnavailable(CheckoutError):
    status_code = 500
    message = "Service de paiement indisponible, réessayez plus tard"
