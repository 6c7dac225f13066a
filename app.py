#!/usr/bin/env python3
"""
Main entry point for the TinyApp URL shortener.

All state lives in memory inside the worker process, so links and accounts
are lost on restart and are not shared between workers.

Usage:
    python app.py

Environment variables:
    HOST / PORT - Address to listen on
    BASE_URL - Fallback base URL for displayed short links
    SESSION_SECRET_KEY - Key for signing session cookies
    BCRYPT_ROUNDS - bcrypt cost factor
    SEED_DEMO_DATA - Set to 'true' to create a demo account and links
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from tinyapp.passwords import PasswordHasher
from tinyapp.registry import InMemoryAccountRegistry, InMemoryLinkRegistry
from tinyapp.service import TinyAppService
from tinyapp.shortcode import ShortCodeGenerator
from tinyapp.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger) -> TinyAppService:
    """Wire registries and service from configuration."""
    generator = ShortCodeGenerator(default_length=config.short_id_length)
    links = InMemoryLinkRegistry(
        generator=generator,
        max_collision_retries=config.max_collision_retries,
        logger=logger.getChild("links"),
    )
    accounts = InMemoryAccountRegistry(
        hasher=PasswordHasher(rounds=config.bcrypt_rounds),
        generator=generator,
        max_collision_retries=config.max_collision_retries,
        logger=logger.getChild("accounts"),
    )
    return TinyAppService(links=links, accounts=accounts, logger=logger)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger
    
    logger.info("Starting TinyApp...")
    
    service = build_service(config, logger)
    if config.seed_demo_data:
        await service.seed_demo_data()
    app.state.service = service
    
    logger.info("Service started successfully")
    
    yield
    
    logger.info("Shutting down TinyApp...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()
    
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    
    logger.info("TinyApp URL Shortener")
    logger.info(f"Configuration: {config.safe_dump()}")
    
    app = create_app(service_instance=None, config=config, logger=logger)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    
    server = uvicorn.Server(uvicorn_config)
    
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True
    
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)
    
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
