# backend/user/routes.py
from typing import Any
from fastapi import APIRouter, Body
from .controllers import (
    create_user, user_login, reset_password, update_biography,
    get_user, get_users, delete_user
)

router = APIRouter()


def _as_body(payload: Any) -> dict:
    # cuerpo ausente o que no es un objeto JSON -> cuerpo vacío (falla la validación)
    return payload if isinstance(payload, dict) else {}

# ------------------------------------------------------------
# 🔹 Signup
# ------------------------------------------------------------
@router.post("/signup", summary="Registrar nuevo usuario")
def signup(payload: Any = Body(default=None)):
    return create_user(_as_body(payload))

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.post("/login", summary="Iniciar sesión con username y password")
def login(payload: Any = Body(default=None)):
    return user_login(_as_body(payload))

# ------------------------------------------------------------
# 🔹 Reset de password
# ------------------------------------------------------------
@router.patch("/resetPassword", summary="Cambiar password de un usuario")
def reset_password_route(payload: Any = Body(default=None)):
    return reset_password(_as_body(payload))

# ------------------------------------------------------------
# 🔹 Actualizar biografía
# ------------------------------------------------------------
@router.patch("/updateBiography", summary="Actualizar biografía de un usuario")
def update_biography_route(payload: Any = Body(default=None)):
    return update_biography(_as_body(payload))

# ------------------------------------------------------------
# 🔹 Obtener usuario por username
# ------------------------------------------------------------
@router.get("/getUser/{username}", summary="Obtener usuario por username")
def get_user_route(username: str):
    return get_user(username)

# ------------------------------------------------------------
# 🔹 Listar usuarios
# ------------------------------------------------------------
@router.get("/getUsers", summary="Obtener lista de usuarios")
def get_users_route():
    return get_users()

# ------------------------------------------------------------
# 🔹 Eliminar usuario por username
# ------------------------------------------------------------
@router.delete("/deleteUser/{username}", summary="Eliminar usuario por username")
def delete_user_route(username: str):
    return delete_user(username)
