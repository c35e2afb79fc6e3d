"""System information collection."""

import logging
from dataclasses import dataclass

from ngfetch.hardware.detector import (
    detect_cpu,
    detect_disk_bytes,
    detect_host,
    detect_memory_bytes,
    detect_network,
)

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1 << 30
BYTES_PER_MB = 1 << 20
SECONDS_PER_HOUR = 3600


class CollectionError(Exception):
    """Raised when a host metric query fails."""

    def __init__(self, metric: str, cause: Exception):
        self.metric = metric
        self.cause = cause
        super().__init__(f"{metric} query failed: {cause}")


@dataclass(frozen=True)
class SystemSnapshot:
    """Snapshot of host facts at time of collection."""

    platform: str
    kernel: str
    hostname: str
    cpu_model: str
    cpu_core_count: int
    memory_total_gb: float
    disk_total_gb: float
    uptime_hours: float
    network_sent_mb: float
    network_recv_mb: float


def bytes_to_gb(value: int) -> float:
    return value / BYTES_PER_GB


def bytes_to_mb(value: int) -> float:
    return value / BYTES_PER_MB


def seconds_to_hours(value: float) -> float:
    return value / SECONDS_PER_HOUR


class HostMetricsProvider:
    """Collect a SystemSnapshot from the host.

    Queries run one at a time. The first failure aborts collection, so a
    caller either gets a complete snapshot or a CollectionError.
    """

    def __init__(self, disk_path: str = "/"):
        self.disk_path = disk_path

    def collect(self) -> SystemSnapshot:
        """Collect current host metrics.

        Returns:
            SystemSnapshot with every field populated.

        Raises:
            CollectionError: If any sub-query fails.
        """
        host = self._query("host", detect_host)
        cpu = self._query("cpu", detect_cpu)
        memory = self._query("memory", detect_memory_bytes)
        disk = self._query("disk", detect_disk_bytes, self.disk_path)
        network = self._query("network", detect_network)

        platform_name = f"{host.platform} {host.platform_version}".strip()

        return SystemSnapshot(
            platform=platform_name,
            kernel=host.kernel,
            hostname=host.hostname,
            cpu_model=cpu.model,
            cpu_core_count=cpu.cores,
            memory_total_gb=bytes_to_gb(memory),
            disk_total_gb=bytes_to_gb(disk),
            uptime_hours=seconds_to_hours(host.uptime_seconds),
            network_sent_mb=bytes_to_mb(network.bytes_sent),
            network_recv_mb=bytes_to_mb(network.bytes_recv),
        )

    @staticmethod
    def _query(metric, func, *args):
        try:
            return func(*args)
        except Exception as e:
            logger.debug(f"{metric} query failed: {e}")
            raise CollectionError(metric, e) from e
