from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from finagent.config import get_config
from finagent.log import logger
from finagent.router.api import routers


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    async with httpx.AsyncClient(timeout=config.http_timeout) as http_client:
        app.state.http_client = http_client
        yield
    logger.info("HTTP client disposed")


app = FastAPI(lifespan=lifespan)


@app.get("/")
async def hello():
    return {"message": "finagent is running"}


for router in routers:
    app.include_router(router)
