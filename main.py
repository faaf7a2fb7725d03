from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.database import connect_to_mongo, close_mongo_connection
from app.enums import MetalType
from app.routers import calculators, configuration, words
from app.services.config_service import ensure_default_config
from config import settings as app_settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await ensure_default_config()
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(
    title="Jewellery Rate Calculator",
    description="Gold and silver price calculator with amounts in Indian English and Hindi words",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware — restrict origins in production
allowed_origins = app_settings.ALLOWED_ORIGINS.split(",") if app_settings.ALLOWED_ORIGINS else ["http://localhost:8000"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(configuration.router, prefix="/config", tags=["Configuration"])
app.include_router(calculators.router, prefix="/calculators", tags=["Calculators"])
app.include_router(words.router, prefix="", tags=["Amount in Words"])

@app.get("/")
async def root():
    return {
        "service": app.title,
        "version": app.version,
        "calculators": [f"/calculators/{metal.value}" for metal in MetalType],
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
