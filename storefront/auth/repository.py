from typing import Dict, Any
from storefront.infra.supabase_client import get_supabase

# --- Auth (supabase.auth.*) ---

def get_user_from_access_token(access_token: str) -> Dict[str, Any]:
    """Récupère et normalise l’utilisateur depuis supabase.auth.get_user(access_token).
    - user_metadata: modifiable par l'utilisateur lui-même (profil)
    - app_metadata: écrit uniquement côté serveur (rôle)
    """
    res = get_supabase().auth.get_user(access_token)
    user = getattr(res, "user", None) or {}
    if not isinstance(user, dict):
        user = {
            "id": getattr(user, "id", None),
            "email": getattr(user, "email", None),
            "user_metadata": getattr(user, "user_metadata", None),
            "app_metadata": getattr(user, "app_metadata", None),
        }
    return user or {}
