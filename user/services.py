# backend/user/services.py
"""
Operaciones de persistencia de usuarios.

Ninguna función lanza excepciones hacia el controlador: ante un fallo
devuelven ``{"error": "<mensaje>"}`` y el controlador lo traduce a un 500.
Los usuarios devueltos nunca incluyen el password.
"""
from typing import Any, Dict, List, Union
import logging

from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from models.user import User
from repositories.user_repository import (
    insert_user,
    find_user_with_password,
    find_user_by_username,
    find_all_users,
    update_user_fields,
    delete_user,
    serialize_user,
)
from .utils import hash_password, verify_password

logger = logging.getLogger("user.services")

UserResponse = Dict[str, Any]
UsersResponse = Union[List[dict], Dict[str, str]]

# Campos que un update puede modificar
UPDATABLE_FIELDS = {"password", "biography"}


def _error(message: str) -> Dict[str, str]:
    return {"error": message}

# ============================================================
# 🔹 Crear usuario (signup)
# ============================================================
def save_user(user: dict) -> UserResponse:
    try:
        new_user = User.model_validate(user)
    except ValidationError as e:
        logger.warning(f"⚠️ Documento de usuario inválido: {e.error_count()} errores")
        return _error("Invalid user document")

    try:
        if find_user_by_username(new_user.username):
            logger.warning(f"⚠️ Usuario ya existe: {new_user.username}")
            return _error("Username already exists")

        doc = new_user.model_dump(exclude={"id"}, exclude_none=True)
        doc["password"] = hash_password(new_user.password)
        return insert_user(doc)
    except DuplicateKeyError:
        logger.warning(f"⚠️ Usuario ya existe (índice único): {new_user.username}")
        return _error("Username already exists")
    except PyMongoError:
        logger.exception(f"❌ Error guardando usuario {new_user.username}")
        return _error("Error when saving user")

# ============================================================
# 🔹 Login con password
# ============================================================
def login_user(credentials: dict) -> UserResponse:
    username = credentials.get("username")
    try:
        user = find_user_with_password(username)
    except PyMongoError:
        logger.exception(f"❌ Error autenticando usuario {username}")
        return _error("Error when authenticating user")

    if not user or not verify_password(credentials.get("password", ""), user.get("password", "")):
        logger.warning(f"🔒 Credenciales inválidas para {username}")
        return _error("Authentication failed")

    return serialize_user(user)

# ============================================================
# 🔹 Actualizar usuario (password / biografía)
# ============================================================
def update_user(username: str, updates: dict) -> UserResponse:
    fields = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS}
    if not fields:
        return _error("No updatable fields provided")
    if "password" in fields:
        fields["password"] = hash_password(fields["password"])

    try:
        user = update_user_fields(username, fields)
    except PyMongoError:
        logger.exception(f"❌ Error actualizando usuario {username}")
        return _error("Error when updating user")

    if not user:
        return _error("User not found")
    return user

# ============================================================
# 🔹 Obtener usuario por username
# ============================================================
def get_user_by_username(username: str) -> UserResponse:
    try:
        user = find_user_by_username(username)
    except PyMongoError:
        logger.exception(f"❌ Error buscando usuario {username}")
        return _error("Error when finding user")

    if not user:
        return _error("User not found")
    return user

# ============================================================
# 🔹 Listar usuarios
# ============================================================
def get_users_list() -> UsersResponse:
    try:
        users = find_all_users()
    except PyMongoError:
        logger.exception("❌ Error listando usuarios")
        return _error("Error when retrieving users")

    if not users:
        logger.warning("⚠️ No se encontraron usuarios registrados.")
    return users

# ============================================================
# 🔹 Eliminar usuario por username
# ============================================================
def delete_user_by_username(username: str) -> UserResponse:
    try:
        user = delete_user(username)
    except PyMongoError:
        logger.exception(f"❌ Error eliminando usuario {username}")
        return _error("Error when deleting user")

    if not user:
        return _error("User not found")
    return user
