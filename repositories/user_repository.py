# backend/repositories/user_repository.py
from database.connection import get_users_db
from config import settings
from pymongo import ReturnDocument
from pymongo.collection import Collection
from typing import List, Optional
import logging

LOG = logging.getLogger("repositories.user")

# Proyección que nunca devuelve el hash de password
SAFE_PROJECTION = {"password": 0}


def users_collection() -> Collection:
    return get_users_db()[settings.USERS_COLLECTION]

# ------------------------------------------------------------
# 🔹 Serialización segura de usuario
# ------------------------------------------------------------
def serialize_user(user: dict) -> Optional[dict]:
    """Quita el password; _id y dateJoined se formatean al salir por SafeUser."""
    if not user:
        return None
    user_copy = dict(user)
    user_copy.pop("password", None)  # nunca exponer password
    return user_copy

# ------------------------------------------------------------
# 🔹 Crear usuario
# ------------------------------------------------------------
def insert_user(user_doc: dict) -> dict:
    """Inserta el documento y devuelve la versión segura con su _id."""
    doc = dict(user_doc)
    result = users_collection().insert_one(doc)
    doc["_id"] = result.inserted_id
    LOG.info(f"✅ Usuario creado con ID {result.inserted_id}")
    return serialize_user(doc)

# ------------------------------------------------------------
# 🔹 Obtener usuario por username
# ------------------------------------------------------------
def find_user_with_password(username: str) -> Optional[dict]:
    """Único acceso que incluye el hash; solo para autenticación."""
    return users_collection().find_one({"username": username})


def find_user_by_username(username: str) -> Optional[dict]:
    return users_collection().find_one({"username": username}, SAFE_PROJECTION)

# ------------------------------------------------------------
# 🔹 Listar todos los usuarios
# ------------------------------------------------------------
def find_all_users() -> List[dict]:
    return [serialize_user(u) for u in users_collection().find({}, SAFE_PROJECTION)]

# ------------------------------------------------------------
# 🔹 Actualizar usuario por username
# ------------------------------------------------------------
def update_user_fields(username: str, fields: dict) -> Optional[dict]:
    user = users_collection().find_one_and_update(
        {"username": username},
        {"$set": fields},
        projection=SAFE_PROJECTION,
        return_document=ReturnDocument.AFTER,
    )
    if user:
        LOG.info(f"✏️ Usuario {username} actualizado: {sorted(fields)}")
    return serialize_user(user)

# ------------------------------------------------------------
# 🔹 Eliminar usuario por username
# ------------------------------------------------------------
def delete_user(username: str) -> Optional[dict]:
    user = users_collection().find_one_and_delete({"username": username}, projection=SAFE_PROJECTION)
    if user:
        LOG.info(f"✅ Usuario eliminado: {username}")
    else:
        LOG.warning(f"⚠️ Usuario no encontrado para eliminar: {username}")
    return serialize_user(user)
