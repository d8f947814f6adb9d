"""Tests for configuration, logging setup and the entry point."""

import asyncio
import json
import logging
import signal

import pytest
import uvicorn

import app as app_module
from config import Config, load_config
from shortener.common.logging_config import LOGGER_NAME, setup_logging
from shortener.service import URLShortenerService
from web_app import create_app


class TestConfig:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        """Defaults match the documented service settings."""
        for name in ("PORT", "DEV_LOG", "SHORT_ID_LENGTH", "MAX_ID_TRIES", "SHUTDOWN_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        config = Config(_env_file=None)

        assert config.port == 3000
        assert config.dev_log is False
        assert config.short_id_length == 4
        assert config.max_id_tries == 5
        assert config.shutdown_timeout == 10

    def test_environment(self, monkeypatch):
        """Settings are read from the environment."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DEV_LOG", "true")

        config = load_config()

        assert config.port == 8080
        assert config.dev_log is True

    def test_overrides(self, monkeypatch):
        """Explicit overrides beat the environment; None is ignored."""
        monkeypatch.setenv("PORT", "8080")

        config = load_config(port=9000, dev_log=None)

        assert config.port == 9000
        assert config.dev_log is False


class TestLogging:
    """Test logging setup."""

    def test_json_output(self, capsys):
        """Production logs are one JSON object per line."""
        logger = setup_logging(level="INFO")

        logger.info('created "quoted" url')

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["level"] == "INFO"
        assert record["logger"] == LOGGER_NAME
        assert record["message"] == 'created "quoted" url'

    def test_json_exception(self, capsys):
        """Tracebacks are included in JSON records."""
        logger = setup_logging(level="INFO")

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("failed")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert "RuntimeError: boom" in record["exc_info"]

    def test_dev_output(self, capsys):
        """Development logs are human-readable."""
        logger = setup_logging(level="DEBUG", dev_mode=True)

        logger.debug("hello")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert "[DEBUG] url_shortener - hello" in line

    def test_handlers_replaced(self):
        """Repeated setup does not stack handlers."""
        setup_logging()
        logger = setup_logging(level="WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING


class TestEntryPoint:
    """Test app.py wiring."""

    def test_parse_args(self):
        """--dev-log is optional and defaults to unset."""
        assert app_module.parse_args(["--dev-log"]).dev_log is True
        assert app_module.parse_args([]).dev_log is None
        assert app_module.parse_args(["--port", "4000"]).port == 4000

    def test_build_service(self, logger):
        """Configuration reaches the generator and storage."""
        config = Config(_env_file=None, short_id_length=6, max_id_tries=3)

        service = app_module.build_service(config, logger)

        assert isinstance(service, URLShortenerService)
        assert service.storage.generator.length == 6
        assert service.storage.max_id_tries == 3
        assert service.visit_timeout == config.shutdown_timeout

    @pytest.mark.asyncio
    async def test_lifespan(self, logger):
        """Lifespan builds the service on startup and drains it on shutdown."""
        config = Config(_env_file=None, shutdown_timeout=1)
        app = create_app(service_instance=None, config=config, logger=logger)

        async with app_module.lifespan(app):
            service = app.state.service
            assert isinstance(service, URLShortenerService)
            short_url = await service.create_short_url("example.com")
            service.record_visit(short_url.id)

        assert service.pending_visits == 0
        assert await service.storage.count_visits() == 1

    def test_remaining_shutdown_time(self, logger, monkeypatch):
        """The shutdown budget counts from the exit signal."""
        config = Config(_env_file=None, shutdown_timeout=10)
        app = create_app(service_instance=None, config=config, logger=logger)

        assert app_module.remaining_shutdown_time(app) == 10

        monkeypatch.setattr(app_module.time, "monotonic", lambda: 104.0)
        app.state.shutdown_started = 100.0
        assert app_module.remaining_shutdown_time(app) == 6.0

        app.state.shutdown_started = 80.0
        assert app_module.remaining_shutdown_time(app) == 0.0

    def test_server_records_shutdown_start(self, logger):
        """The first exit signal stamps the shutdown start."""
        config = Config(_env_file=None)
        app = create_app(service_instance=None, config=config, logger=logger)
        server = app_module.ShortenerServer(uvicorn.Config(app), app)

        server.handle_exit(signal.SIGTERM, None)
        started = app.state.shutdown_started
        server.handle_exit(signal.SIGTERM, None)

        assert server.should_exit
        assert app.state.shutdown_started == started

    @pytest.mark.asyncio
    async def test_lifespan_spent_budget_cancels_visits(self, logger, monkeypatch):
        """Visits still pending when the budget is used up are cancelled."""
        config = Config(_env_file=None, shutdown_timeout=10)
        app = create_app(service_instance=None, config=config, logger=logger)

        async def slow(url_id, visit):
            await asyncio.sleep(60)

        async with app_module.lifespan(app):
            service = app.state.service
            monkeypatch.setattr(service.storage, "register_visit", slow)
            task = service.record_visit("abcd")
            app.state.shutdown_started = app_module.time.monotonic() - 20

        await asyncio.sleep(0.01)
        assert task.cancelled()
        assert service.pending_visits == 0
