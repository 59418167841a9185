import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from pymongo.errors import PyMongoError

from solosphere.config import settings
from solosphere.database import client, ping
from solosphere.routers import bids, jobs, session

logger = logging.getLogger("solosphere")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: confirm the deployment answers; requests still fail on their own if it does not
    try:
        if ping():
            logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    except PyMongoError as exc:
        logger.error("Could not reach MongoDB at startup: %s", exc)
    yield
    client.close()


app = FastAPI(
    title="SoloSphere",
    description="Job postings and bids API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session.router)
app.include_router(jobs.router)
app.include_router(bids.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello from SoloSphere Server...."


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
