"""Unit tests for structured logging of generation runs."""

import json
import logging

import pytest

from dealer_datagen.generators.master_generators import DatasetGenerator
from dealer_datagen.shared.exceptions import MissingDependencyError
from dealer_datagen.shared.logging_utils import get_structured_logger


def _entries(caplog, name: str) -> list[dict]:
    return [
        json.loads(r.message)
        for r in caplog.records
        if r.name == name and r.message.startswith("{")
    ]


class TestStructuredLogger:
    def test_generate_correlation_id(self):
        corr_id = get_structured_logger("test").generate_correlation_id()
        assert corr_id.startswith("GEN_")
        assert len(corr_id) == 16

    def test_set_and_clear_correlation_id(self):
        logger = get_structured_logger("test")
        assert logger.correlation_id is None

        logger.set_correlation_id("GEN_abc")
        assert logger.correlation_id == "GEN_abc"

        logger.clear_correlation_id()
        assert logger.correlation_id is None

    def test_log_format(self, caplog):
        logger = get_structured_logger("test.format")
        logger.set_correlation_id("GEN_123")

        with caplog.at_level(logging.INFO):
            logger.info("Collection built", collection="deals", count=120)

        (entry,) = _entries(caplog, "test.format")
        assert entry["level"] == "INFO"
        assert entry["message"] == "Collection built"
        assert entry["correlation_id"] == "GEN_123"
        assert "timestamp" in entry
        assert entry["context"] == {"collection": "deals", "count": 120}

    def test_without_correlation_id(self, caplog):
        logger = get_structured_logger("test.none")
        with caplog.at_level(logging.INFO):
            logger.info("Plain")

        (entry,) = _entries(caplog, "test.none")
        assert entry["correlation_id"] == "none"
        assert "context" not in entry

    def test_levels(self, caplog):
        logger = get_structured_logger("test.levels")
        with caplog.at_level(logging.DEBUG):
            logger.debug("d")
            logger.info("i")
            logger.warning("w")
            logger.error("e")

        levels = [e["level"] for e in _entries(caplog, "test.levels")]
        assert levels == ["DEBUG", "INFO", "WARNING", "ERROR"]

    def test_disabled_level_skipped(self, caplog):
        logger = get_structured_logger("test.quiet")
        with caplog.at_level(logging.WARNING):
            logger.info("hidden")
        assert _entries(caplog, "test.quiet") == []

    def test_non_json_values_stringified(self, caplog):
        from datetime import UTC, datetime

        logger = get_structured_logger("test.values")
        with caplog.at_level(logging.INFO):
            logger.info("When", at=datetime(2025, 1, 1, tzinfo=UTC))

        (entry,) = _entries(caplog, "test.values")
        assert entry["context"]["at"].startswith("2025-01-01")


class TestBoundContext:
    def test_bound_fields_merged(self, caplog):
        logger = get_structured_logger("test.bind")
        logger.bind(seed=42)

        with caplog.at_level(logging.INFO):
            logger.info("Built", count=3)
            logger.info("Overridden", seed=7)

        first, second = _entries(caplog, "test.bind")
        assert first["context"] == {"seed": 42, "count": 3}
        assert second["context"]["seed"] == 7

    def test_unbind(self, caplog):
        logger = get_structured_logger("test.unbind")
        logger.bind(seed=42)
        logger.unbind()

        with caplog.at_level(logging.INFO):
            logger.info("Bare")

        (entry,) = _entries(caplog, "test.unbind")
        assert "context" not in entry

    def test_run_scope(self, caplog):
        logger = get_structured_logger("test.run")

        with caplog.at_level(logging.INFO):
            with logger.run(seed=1) as run_id:
                assert logger.correlation_id == run_id
                logger.info("Inside")
            logger.info("Outside")

        inside, outside = _entries(caplog, "test.run")
        assert inside["correlation_id"] == run_id
        assert inside["context"] == {"seed": 1}
        assert outside["correlation_id"] == "none"
        assert "context" not in outside

    def test_run_scope_cleared_on_error(self):
        logger = get_structured_logger("test.run_error")
        with pytest.raises(RuntimeError):
            with logger.run(seed=1):
                raise RuntimeError("boom")
        assert logger.correlation_id is None


class TestGenerationLogging:
    NAME = "dealer_datagen.generators.master_generators.dataset_generator"

    def test_generation_run_is_correlated(self, caplog, small_config):
        with caplog.at_level(logging.INFO):
            DatasetGenerator(small_config).generate()

        entries = [
            e
            for e in _entries(caplog, self.NAME)
            if e["message"].startswith("Dataset generation")
        ]
        assert [e["message"] for e in entries] == [
            "Dataset generation started",
            "Dataset generation completed",
        ]
        assert entries[0]["correlation_id"] == entries[1]["correlation_id"]
        assert entries[0]["correlation_id"].startswith("GEN_")
        assert entries[1]["context"]["seed"] == 7
        assert entries[1]["context"]["counts"]["deals"] == 20

    def test_failure_logged(self, caplog, small_config):
        config = small_config.model_copy(
            update={"volume": small_config.volume.model_copy(update={"employees": 0})}
        )
        with caplog.at_level(logging.INFO):
            with pytest.raises(MissingDependencyError):
                DatasetGenerator(config).generate()

        messages = [e["message"] for e in _entries(caplog, self.NAME)]
        assert "Dataset generation failed" in messages
