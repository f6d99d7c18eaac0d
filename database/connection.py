# backend/database/connection.py
import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import settings

logger = logging.getLogger("database.connection")

_client: Optional[MongoClient] = None

# ============================================================
# 🔧 CONSTRUCTOR DE URI
# ============================================================
def build_mongo_uri() -> str:
    if settings.MONGO_URI:
        return settings.MONGO_URI
    host = f"{settings.MONGO_HOST}:{settings.MONGO_PORT}"
    if settings.MONGO_USER and settings.MONGO_PASSWORD:
        return f"mongodb://{settings.MONGO_USER}:{settings.MONGO_PASSWORD}@{host}"
    return f"mongodb://{host}"

# ============================================================
# 👥 CONEXIÓN A BASE DE DATOS DE USUARIOS
# ============================================================
def get_client() -> MongoClient:
    """Cliente compartido; pymongo mantiene su propio pool de conexiones."""
    global _client
    if _client is None:
        try:
            _client = MongoClient(build_mongo_uri(), tz_aware=True)
        except PyMongoError as e:
            logger.error(f"❌ Error creando cliente MongoDB: {e}")
            raise
    return _client


def get_users_db() -> Database:
    db = get_client()[settings.MONGO_DB]
    logger.debug(f"Usando base de usuarios: {settings.MONGO_DB}")
    return db


def close_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("🔌 Conexión a MongoDB cerrada.")

# ============================================================
# 🚀 INICIALIZACIÓN DE BASE
# ============================================================
def init_db() -> Database:
    """Verifica la conexión y garantiza el índice único sobre username."""
    try:
        db = get_users_db()
        db.command("ping")
        db[settings.USERS_COLLECTION].create_index(
            [("username", ASCENDING)], unique=True, name="username_unique"
        )
        logger.info(f"✅ Conexión inicializada correctamente a {settings.MONGO_DB}.")
        return db
    except PyMongoError as e:
        logger.error(f"❌ Error al inicializar la base de datos: {e}")
        raise
