# client/auth.py
import logging
from typing import Callable, Optional

from .user_service import UserServiceClient, UserServiceError

LOG = logging.getLogger("client.auth")

HOME_PATH = "/home"


class AuthForm:
    """
    Estado y lógica de los formularios de login / signup.

    - handle_input_change: actualiza username, password o confirmPassword.
    - toggle_password_visibility: muestra u oculta el password.
    - validate_inputs: campos requeridos y confirmación (solo signup).
    - handle_submit: valida, llama a la API, guarda el usuario y navega a /home.
    """

    def __init__(
        self,
        auth_type: str,
        set_user: Callable[[dict], None],
        navigate: Callable[[str], None],
        api: Optional[UserServiceClient] = None,
    ):
        self.auth_type = auth_type
        self.set_user = set_user
        self.navigate = navigate
        self.api = api or UserServiceClient()

        self.username = ""
        self.password = ""
        self.password_confirmation = ""
        self.show_password = False
        self.err = ""

    def toggle_password_visibility(self):
        self.show_password = not self.show_password

    def handle_input_change(self, value: str, field: str):
        value = value.strip()
        if field == "username":
            self.username = value
        elif field == "password":
            self.password = value
        elif field == "confirmPassword":
            self.password_confirmation = value

    def validate_inputs(self) -> bool:
        if self.username == "" or self.password == "":
            self.err = "Please enter a valid username and password"
            return False

        if self.auth_type == "signup" and self.password != self.password_confirmation:
            self.err = "Password and Password confirmation do not match"
            return False

        self.err = ""
        return True

    def handle_submit(self) -> Optional[dict]:
        """Devuelve el usuario autenticado, o None si hubo error (ver ``err``)."""
        if not self.validate_inputs():
            return None

        credentials = {"username": self.username, "password": self.password}
        try:
            if self.auth_type == "login":
                user = self.api.login_user(credentials)
            elif self.auth_type == "signup":
                user = self.api.create_user(credentials)
            else:
                raise UserServiceError("Invalid authentication type")
        except UserServiceError as e:
            LOG.warning(f"⚠️ {self.auth_type} fallido para {self.username}: {e}")
            self.err = str(e)
            return None

        self.set_user(user)
        self.navigate(HOME_PATH)
        return user
