import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from code_optimizer.api.v1.optimizer import router as optimizer_router
from code_optimizer.core.config import get_settings

settings = get_settings()
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=f"{settings.APP_NAME} API")

# CORS (allow the web frontend origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(optimizer_router, prefix="/api/v1")
