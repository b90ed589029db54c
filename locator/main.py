# locator/main.py
from fastapi import FastAPI
import uvicorn
from contextlib import asynccontextmanager
from locator.api import geolocation
from locator.core.config import HOST, PORT
from locator.core.logger import logger
from locator.core.registry import set_resolver
from locator.core.resolver import LocationResolver


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("App starting up, creating location resolver")
    resolver = LocationResolver()
    set_resolver(resolver)
    app.state.resolver = resolver

    yield

    await resolver.aclose()
    set_resolver(None)
    logger.info("App shutting down, cleanup complete")


app = FastAPI(lifespan=lifespan, title="IP Geolocation API")

app.include_router(geolocation.router)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("locator.main:app", host=HOST, port=PORT)
