"""
Test infrastructure components: logging, metrics, settings.

These tests verify the observability layer around the generators and codec.
"""

import pytest
import structlog

from idkit.codec.formats import IdFormat
from idkit.kernel.errors import InvalidFormat, Overflow
from idkit.kernel.ids import AtomicCounter, TimeOrderedIdGenerator
from idkit.kernel.logging import (
    LogOperation,
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)
from idkit.kernel.metrics import (
    decode_total,
    ids_generated_total,
    offset_wraps_total,
    timestamp_overflow_total,
)
from idkit.kernel.settings import IdKitSettings
from idkit.kernel.time import TestClockProvider
from idkit.service import IdService


class TestLoggingFramework:
    """Test structured logging framework."""

    def test_configure_logging_console(self) -> None:
        configure_logging(json_output=False, log_level="INFO")
        logger = get_logger(__name__)
        assert logger is not None

    def test_configure_logging_json(self) -> None:
        configure_logging(json_output=True, log_level="DEBUG")
        logger = get_logger(__name__)
        assert logger is not None

    def test_correlation_id(self) -> None:
        cid = get_correlation_id()
        assert cid is not None
        assert len(cid) > 0

        set_correlation_id("test-correlation-123")
        assert get_correlation_id() == "test-correlation-123"

    def test_correlation_id_is_bound_for_every_logger(self) -> None:
        set_correlation_id("issue-run-7")

        assert structlog.contextvars.get_contextvars()["correlation_id"] == "issue-run-7"

    def test_log_operation_context_manager(self) -> None:
        configure_logging(json_output=False, log_level="INFO")
        logger = get_logger(__name__)

        with LogOperation(logger, "convert", value="1a"):
            pass

    def test_log_operation_with_exception(self) -> None:
        configure_logging(json_output=False, log_level="INFO")
        logger = get_logger(__name__)

        with pytest.raises(InvalidFormat):
            with LogOperation(logger, "decode"):
                raise InvalidFormat("a b@c", "auto")


class TestMetrics:
    """Test Prometheus metrics collection."""

    def test_ids_generated_metric(self, service: IdService) -> None:
        before = ids_generated_total.labels(kind="time_ordered")._value.get()

        service.issue_time_ordered()
        service.issue_time_ordered()

        after = ids_generated_total.labels(kind="time_ordered")._value.get()
        assert after == before + 2

    def test_random_ids_generated_metric(self, service: IdService) -> None:
        before = ids_generated_total.labels(kind="random")._value.get()

        service.issue_random()

        after = ids_generated_total.labels(kind="random")._value.get()
        assert after == before + 1

    def test_decode_metrics(self, service: IdService) -> None:
        success_before = decode_total.labels(format="auto", status="success")._value.get()
        failure_before = decode_total.labels(format="auto", status="failure")._value.get()

        service.parse("1a")
        with pytest.raises(InvalidFormat):
            service.parse("a b@c")

        assert (
            decode_total.labels(format="auto", status="success")._value.get()
            == success_before + 1
        )
        assert (
            decode_total.labels(format="auto", status="failure")._value.get()
            == failure_before + 1
        )

    def test_offset_wrap_metric(self) -> None:
        generator = TimeOrderedIdGenerator(
            clock=TestClockProvider(1000), counter=AtomicCounter(start=65535)
        )
        before = offset_wraps_total._value.get()

        generator.generate()

        assert offset_wraps_total._value.get() == before + 1

    def test_overflow_metric(self) -> None:
        generator = TimeOrderedIdGenerator(clock=TestClockProvider(2**48))
        before = timestamp_overflow_total._value.get()

        with pytest.raises(Overflow):
            generator.generate()

        assert timestamp_overflow_total._value.get() == before + 1


class TestSettings:
    """Test runtime settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("IDKIT_LOG_LEVEL", "IDKIT_JSON_LOGS", "IDKIT_METRICS_PORT",
                     "IDKIT_DEFAULT_FORMAT", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

        settings = IdKitSettings.from_env()

        assert settings.log_level == "WARNING"
        assert settings.json_logs is False
        assert settings.metrics_port == 9090
        assert settings.default_format is IdFormat.BASE36

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IDKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("IDKIT_JSON_LOGS", "true")
        monkeypatch.setenv("IDKIT_METRICS_PORT", "9100")
        monkeypatch.setenv("IDKIT_DEFAULT_FORMAT", "HEX")

        settings = IdKitSettings.from_env()

        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True
        assert settings.metrics_port == 9100
        assert settings.default_format is IdFormat.HEX

    def test_production_enables_json_logs(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IDKIT_JSON_LOGS", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert IdKitSettings.from_env().json_logs is True

    def test_explicit_json_flag_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IDKIT_JSON_LOGS", "0")
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert IdKitSettings.from_env().json_logs is False

    def test_invalid_port_rejected(self) -> None:
        with pytest.raises(ValueError):
            IdKitSettings(metrics_port=70000)


class TestMetricsServer:
    """Test the standalone metrics server entry point."""

    def test_main_starts_server_on_requested_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from idkit import metrics_server

        started: list[int] = []

        def stop(seconds: float) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(metrics_server, "start_metrics_server", lambda port: started.append(port))
        monkeypatch.setattr(metrics_server.time, "sleep", stop)
        monkeypatch.setattr("sys.argv", ["idkit-metrics", "--port", "9191"])

        metrics_server.main()

        assert started == [9191]
