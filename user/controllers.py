# backend/user/controllers.py
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
import logging

from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from models.user import SafeUser
from .services import (
    save_user,
    login_user,
    update_user,
    get_user_by_username,
    get_users_list,
    delete_user_by_username,
)

logger = logging.getLogger("user.controllers")

INVALID_USER_BODY = "Invalid user body"
INVALID_REQUEST_BODY = "Invalid request body"

# ============================================================
# 🔹 Validaciones de cuerpo
# ============================================================
def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_user_body_valid(payload: Mapping) -> bool:
    """username y password presentes y no vacíos."""
    return _is_non_empty_str(payload.get("username")) and _is_non_empty_str(payload.get("password"))


def is_signup_body_valid(payload: Mapping) -> bool:
    """Como is_user_body_valid; si viene biografía debe ser texto."""
    return is_user_body_valid(payload) and isinstance(payload.get("biography", ""), str)


def is_update_biography_body_valid(payload: Mapping) -> bool:
    # biografía vacía está permitida: sirve para borrarla
    return _is_non_empty_str(payload.get("username")) and isinstance(payload.get("biography"), str)


def is_service_error(result: Any) -> bool:
    return isinstance(result, Mapping) and "error" in result

# ============================================================
# 🔹 Respuestas
# ============================================================
def _bad_request(message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=400)


def _server_error(action: str, error: Any) -> PlainTextResponse:
    # el detalle queda en el log, nunca en la respuesta
    logger.error(f"❌ Error when {action}: {error}")
    return PlainTextResponse(f"Error when {action}", status_code=500)


def _safe_user_response(result: Any, action: str):
    if is_service_error(result):
        return _server_error(action, result["error"])
    try:
        return JSONResponse(SafeUser.model_validate(result).to_json())
    except ValidationError as e:
        return _server_error(action, e)

# ============================================================
# 🔹 Signup
# ============================================================
def create_user(payload: Mapping):
    if not is_signup_body_valid(payload):
        logger.warning("⚠️ Signup con cuerpo inválido")
        return _bad_request(INVALID_USER_BODY)

    user = {
        "username": payload["username"],
        "password": payload["password"],
        "dateJoined": datetime.now(timezone.utc),
    }
    if "biography" in payload:
        user["biography"] = payload["biography"]

    logger.info(f"🧩 Registrando usuario: {user['username']}")
    return _safe_user_response(save_user(user), "saving user")

# ============================================================
# 🔹 Login
# ============================================================
def user_login(payload: Mapping):
    if not is_user_body_valid(payload):
        logger.warning("⚠️ Login con cuerpo inválido")
        return _bad_request(INVALID_USER_BODY)

    credentials = {"username": payload["username"], "password": payload["password"]}
    return _safe_user_response(login_user(credentials), "logging in")

# ============================================================
# 🔹 Reset de password
# ============================================================
def reset_password(payload: Mapping):
    if not is_user_body_valid(payload):
        logger.warning("⚠️ Reset de password con cuerpo inválido")
        return _bad_request(INVALID_USER_BODY)

    result = update_user(payload["username"], {"password": payload["password"]})
    return _safe_user_response(result, "resetting password")

# ============================================================
# 🔹 Actualizar biografía
# ============================================================
def update_biography(payload: Mapping):
    if not is_update_biography_body_valid(payload):
        logger.warning("⚠️ Actualización de biografía con cuerpo inválido")
        return _bad_request(INVALID_REQUEST_BODY)

    result = update_user(payload["username"], {"biography": payload["biography"]})
    return _safe_user_response(result, "updating biography")

# ============================================================
# 🔹 Obtener usuario
# ============================================================
def get_user(username: str):
    return _safe_user_response(get_user_by_username(username), "getting user")

# ============================================================
# 🔹 Listar usuarios
# ============================================================
def get_users():
    result = get_users_list()
    if is_service_error(result):
        return _server_error("getting users", result["error"])
    try:
        return JSONResponse([SafeUser.model_validate(u).to_json() for u in result])
    except ValidationError as e:
        return _server_error("getting users", e)

# ============================================================
# 🔹 Eliminar usuario
# ============================================================
def delete_user(username: str):
    return _safe_user_response(delete_user_by_username(username), "deleting user")
