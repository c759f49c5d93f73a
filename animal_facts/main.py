"""Entrypoint for the animal facts service."""

import uvicorn
from fastapi import FastAPI

from .api import ServiceConfig, create_app
from .config import settings
from .service import AnimalFactProcessor


processor = AnimalFactProcessor(settings)

app: FastAPI = create_app(
    processor,
    ServiceConfig(
        description="Fetches facts about animals from upstream providers.",
        cors_allow_origins=settings.cors_allow_origins,
        log_level=settings.log_level,
    ),
)


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
