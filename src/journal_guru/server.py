"""Run the relay backend under uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from journal_guru.api.app import create_app
from journal_guru.configuration import configure_logging, settings
from journal_guru.providers import credential_name

logger = logging.getLogger("journal_guru.server")


def run() -> None:
    configure_logging(settings.log_level)
    app = create_app(settings)
    base = f"http://localhost:{settings.port}"
    logger.info("Journal Guru backend server running on %s", base)
    logger.info("API endpoint: %s/api/generate-prompts", base)
    logger.info(
        "Provider: %s model=%s (credential read from %s)",
        settings.llm_provider,
        settings.model,
        credential_name(settings.llm_provider),
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
