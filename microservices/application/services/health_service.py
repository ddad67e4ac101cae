"""
Health indicator service.

Runs memory, storage and application indicators and folds them into a
terminus-style report. Each service exposes its own probe profile.

Dependencies: microservices.configs, microservices.models.health
System role: Health, readiness and liveness checks
"""

import logging
import os
import resource
import shutil
import sys
import time
from collections.abc import Callable
from datetime import datetime, timezone

from microservices.configs import Settings
from microservices.models.health import HealthReport, IndicatorResult

logger = logging.getLogger(__name__)

MB = 1024 * 1024

Indicator = Callable[[], IndicatorResult]


def current_rss_bytes() -> int:
    """
    Resident set size of this process.

    Reads /proc on Linux; elsewhere falls back to the peak RSS reported by
    getrusage.
    """
    try:
        with open("/proc/self/statm", encoding="ascii") as statm:
            resident_pages = int(statm.read().split()[1])
        return resident_pages * os.sysconf("SC_PAGE_SIZE")
    except (OSError, ValueError, IndexError):
        peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # ru_maxrss is bytes on macOS, kilobytes elsewhere
        return peak if sys.platform == "darwin" else peak * 1024


class HealthService:
    """Health check orchestrator."""

    def __init__(self, settings: Settings, started_at: float | None = None) -> None:
        """
        Initialize health service.

        Args:
            settings: Service settings (thresholds, name, version)
            started_at: Monotonic start time used for uptime
        """
        self.settings = settings
        self.started_at = time.monotonic() if started_at is None else started_at

    def check_memory_rss(self, key: str, threshold_mb: int) -> IndicatorResult:
        rss = current_rss_bytes()
        return IndicatorResult(
            key=key,
            healthy=rss <= threshold_mb * MB,
            details={"used_mb": round(rss / MB, 2), "threshold_mb": threshold_mb},
        )

    def check_storage(self, key: str = "storage") -> IndicatorResult:
        health = self.settings.health
        try:
            usage = shutil.disk_usage(health.storage_path)
        except OSError as e:
            return IndicatorResult(key=key, healthy=False, details={"message": str(e)})
        used_fraction = usage.used / usage.total if usage.total else 0.0
        return IndicatorResult(
            key=key,
            healthy=used_fraction <= health.storage_threshold_percent,
            details={
                "path": health.storage_path,
                "used_percent": round(used_fraction, 4),
                "threshold_percent": health.storage_threshold_percent,
            },
        )

    def check_application(self, key: str = "app") -> IndicatorResult:
        return IndicatorResult(
            key=key,
            healthy=True,
            details={
                "uptime": round(time.monotonic() - self.started_at, 3),
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "version": self.settings.service_version,
            },
        )

    def run_checks(self, indicators: list[Indicator]) -> HealthReport:
        """
        Run indicators and aggregate them.

        An indicator that raises is reported as down with the error message.

        Args:
            indicators: Zero-argument callables returning IndicatorResult

        Returns:
            HealthReport: "ok" only when every indicator is healthy
        """
        info: dict[str, dict] = {}
        errors: dict[str, dict] = {}
        details: dict[str, dict] = {}

        for indicator in indicators:
            try:
                result = indicator()
            except Exception as e:
                logger.exception("Health indicator raised", extra={"error": str(e)})
                name = getattr(indicator, "__name__", "indicator")
                result = IndicatorResult(key=name, healthy=False, details={"message": str(e)})

            entry = {"status": "up" if result.healthy else "down", **result.details}
            details[result.key] = entry
            if result.healthy:
                info[result.key] = entry
            else:
                errors[result.key] = entry

        if errors:
            logger.warning("Health check failed", extra={"failed_indicators": list(errors)})

        return HealthReport(
            status="error" if errors else "ok",
            info=info,
            error=errors,
            details=details,
        )

    def health(self) -> HealthReport:
        """Full health check."""
        thresholds = self.settings.health
        indicators: list[Indicator] = [
            lambda: self.check_memory_rss("memory_rss", thresholds.memory_rss_mb),
            self.check_storage,
        ]
        if self.settings.service_name == "service-b":
            indicators.append(self.check_application)
        return self.run_checks(indicators)

    def readiness(self) -> HealthReport:
        """Readiness check."""
        if self.settings.service_name == "service-b":
            return self.run_checks([self.check_application])
        thresholds = self.settings.health
        return self.run_checks([
            lambda: self.check_memory_rss("memory_rss", thresholds.ready_memory_rss_mb),
        ])

    def liveness(self) -> HealthReport:
        """Liveness check."""
        if self.settings.service_name == "service-b":
            thresholds = self.settings.health
            return self.run_checks([
                lambda: self.check_memory_rss("memory_rss", thresholds.live_memory_rss_mb),
            ])
        return self.run_checks([])
