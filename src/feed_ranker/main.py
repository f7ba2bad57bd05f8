from fastapi import Depends, FastAPI

from .routers import health, scorers
from .security import verify_api_key

app = FastAPI(
    title="Feed Ranker",
    description="Ranking stages for bluesky feed candidates",
    version="0.1.0"
)

app.include_router(health.router)
app.include_router(scorers.router)


@app.get("/", dependencies=[Depends(verify_api_key)])
async def root():
    return {"message": "Feed Ranker"}
