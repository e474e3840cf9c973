import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import CORS_ALLOW_ORIGINS, HOST, LOG_LEVEL, PORT
from core.registry import build_registry
from routers.metrics import router as metrics_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Synthetic Metrics API")
app.state.registry = build_registry()


@app.on_event("startup")
def startup() -> None:
    logger.info("Serving metrics: %s", ", ".join(sorted(app.state.registry)))


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(metrics_router, prefix="/api")


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
