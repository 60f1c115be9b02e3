import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from careerforge.core.config import settings
from careerforge.db.session import init_db
from careerforge.routes import cover_letters, insights, interview, users
from careerforge.services.ai_client import can_generate

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("careerforge")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if not can_generate():
        log.warning("OPENAI_API_KEY is missing. AI actions will return fallback data.")
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(users.router)
app.include_router(cover_letters.router)
app.include_router(insights.router)
app.include_router(interview.router)


@app.get("/healthz")
def health():
    return {"ok": True, "service": "careerforge", "ai_enabled": can_generate()}
