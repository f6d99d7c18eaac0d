from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from database.connection import init_db, close_client
import logging

# =====================================================
# * Importación de Routers
# =====================================================
from user.routes import router as user_router

# =====================================================
# * Configuración de Logging global
# =====================================================
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger("main")

# =====================================================
# * Inicialización de la Base de Datos
# =====================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.db = init_db()  # acceso global a la DB
    logger.info("✅ Base de datos inicializada correctamente y aplicación lista.")
    yield
    close_client()

# =====================================================
# * Inicialización de la aplicación
# =====================================================
app = FastAPI(
    title=f"{settings.PROJECT_NAME} Backend",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# =====================================================
# * Configuración CORS
# =====================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =====================================================
# * Registro de Rutas
# =====================================================
app.include_router(user_router, prefix="/user", tags=["User"])

logger.info("📜 Routers registrados:")
logger.info(" - /user -> UserRouter")

# =====================================================
# * Ruta raíz
# =====================================================
@app.get("/", summary="Ruta raíz del backend")
def root():
    return {
        "message": f"🚀 {settings.PROJECT_NAME} Backend activo",
        "version": settings.VERSION,
        "env": settings.ENV
    }

# =====================================================
# * Mensaje de arranque
# =====================================================
logger.info(f"🌍 {settings.PROJECT_NAME} backend iniciado en modo '{settings.ENV}'.")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", reload=settings.DEBUG)
