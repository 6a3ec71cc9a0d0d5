from fastapi import FastAPI
from .config import settings
from .routes.compliance import router as compliance_router

app = FastAPI(title="Shipgate Compliance Gate",
              description="Decides whether a nicotine order may legally ship",
    version=settings.API_VERSION,
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.include_router(compliance_router)

@app.get("/health")
def health():
    return {"ok": True}
