"""
Ticketing Service - Main Application
Handles ticket purchase validation, seat reservation and payment.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import os

from fastapi import FastAPI
import uvicorn

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Ticketing Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Ticketing Service] Dependency injection wired')

    yield

    Logger.base.info('🛑 [Ticketing Service] Shutting down...')
    cleanup()
    container.unwire()
    Logger.base.info('👋 [Ticketing Service] Shutdown complete')


app = create_app(lifespan=lifespan)


def run() -> None:
    uvicorn.run(
        'src.service.ticketing.main:app',
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', '8000')),
        log_config=None,  # Keep loguru as the only sink
    )


if __name__ == '__main__':
    run()
