"""
FastAPI main application
Expert Judging Server - trimmed-mean scoring and team ranking

Routers in judging/api/:
- health.py: Health check and system status
- teams.py: Team management
- experts.py: Expert (judge) management
- categories.py: Scoring categories
- scores.py: Score submission (upsert) and per-team raw scores
- results.py: Ranked results

All routers access shared state via judging.state module.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from judging import state
from judging.config import get_config_path, load_config, seed_store

from judging.api import health, teams, experts, categories, scores, results


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: load settings and seed the store
    config_path = get_config_path()
    try:
        state.SETTINGS = load_config(config_path)
        logging.getLogger().setLevel(state.SETTINGS.log_level.upper())
        seed_store(state.STORE, state.SETTINGS)
        logger.info(f"✅ Server started with config {config_path}")
    except Exception as e:
        logger.error(f"❌ Failed to load config {config_path}: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Expert Judging Server",
    description="Experts score teams per category; results use trimmed means summed across categories",
    version=health.VERSION,
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# CRUD endpoints (/teams, /experts, /categories)
app.include_router(teams.router)
app.include_router(experts.router)
app.include_router(categories.router)

# Score submission (POST /scores, GET /scores/{team_id})
app.include_router(scores.router)

# Results (GET /results)
app.include_router(results.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
