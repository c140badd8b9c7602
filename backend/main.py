import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.dependencies import get_config_store

config = get_config_store().config

# Configure file + console logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.FileHandler(config.log_file, mode="a"),
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger(__name__)

from backend.api.routes import router, reference_router, config_router

app = FastAPI(title="Business Valuation Calculator", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(reference_router)
app.include_router(config_router)

logger.info(f"Business Valuation Calculator started (language={config.language.value})")


@app.get("/")
async def root():
    return {"message": "Business Valuation Calculator API", "docs": "/docs"}
