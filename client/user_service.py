# client/user_service.py
"""Cliente HTTP mínimo para los endpoints de /user usados por los formularios."""
import logging
import requests
from config import settings

LOG = logging.getLogger("client.user_service")

USER_API_URL = "/user"


class UserServiceError(Exception):
    pass


class UserServiceClient:
    def __init__(self, base_url: str = None, timeout: int = 30):
        self.base_url = (base_url or settings.API_BASE).rstrip("/")
        self.timeout = timeout

    def _post(self, path: str, payload: dict, error_message: str) -> dict:
        url = f"{self.base_url}{USER_API_URL}{path}"
        try:
            resp = requests.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            LOG.error(f"❌ Error de red en {url}: {e}")
            raise UserServiceError(error_message) from e

        if resp.status_code != 200:
            LOG.warning(f"⚠️ {url} -> {resp.status_code}: {resp.text}")
            raise UserServiceError(error_message)
        return resp.json()

    # =====================================================
    # * SIGNUP
    # =====================================================
    def create_user(self, credentials: dict) -> dict:
        return self._post("/signup", credentials, "Error while creating a new user")

    # =====================================================
    # * LOGIN
    # =====================================================
    def login_user(self, credentials: dict) -> dict:
        return self._post("/login", credentials, "Error while logging in")
