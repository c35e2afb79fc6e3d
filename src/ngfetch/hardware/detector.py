"""Individual host metric queries."""

import logging
import platform
import socket
import time
from dataclasses import dataclass

import cpuinfo
import psutil

logger = logging.getLogger(__name__)


@dataclass
class HostInfo:
    platform: str
    platform_version: str
    kernel: str
    hostname: str
    uptime_seconds: float


@dataclass
class CPUInfo:
    model: str
    cores: int


@dataclass
class NetworkCounters:
    bytes_sent: int
    bytes_recv: int


def detect_platform() -> tuple[str, str]:
    """Detect the OS name and version.

    Returns:
        (name, version) such as ("ubuntu", "22.04") or ("darwin", "14.2").
    """
    system = platform.system()

    if system == "Linux":
        try:
            release = platform.freedesktop_os_release()
            return release.get("ID", "linux"), release.get("VERSION_ID", "")
        except OSError as e:
            logger.debug(f"os-release not readable: {e}")
            return "linux", platform.release()
    elif system == "Darwin":
        return "darwin", platform.mac_ver()[0]

    return system.lower(), platform.release()


def detect_host() -> HostInfo:
    """Detect host identity and uptime."""
    name, version = detect_platform()
    uptime = max(time.time() - psutil.boot_time(), 0.0)
    return HostInfo(
        platform=name,
        platform_version=version,
        kernel=platform.release(),
        hostname=socket.gethostname(),
        uptime_seconds=uptime,
    )


def detect_cpu() -> CPUInfo:
    """Detect CPU model name and logical core count.

    Raises:
        RuntimeError: If the core count cannot be determined.
    """
    info = cpuinfo.get_cpu_info()
    model = info.get("brand_raw") or platform.processor() or "Unknown"

    cores = psutil.cpu_count(logical=True)
    if not cores:
        raise RuntimeError("logical CPU count unavailable")

    return CPUInfo(model=model.strip(), cores=cores)


def detect_memory_bytes() -> int:
    """Detect total physical memory in bytes."""
    return psutil.virtual_memory().total


def detect_disk_bytes(path: str = "/") -> int:
    """Detect total capacity in bytes of the filesystem holding ``path``."""
    return psutil.disk_usage(path).total


def detect_network() -> NetworkCounters:
    """Detect cumulative network counters since boot.

    Uses aggregate counters. When the platform hands back per-interface
    counters instead, the first interface wins.

    Raises:
        RuntimeError: If no counters are available.
    """
    counters = psutil.net_io_counters(pernic=False)
    if isinstance(counters, dict):
        counters = next(iter(counters.values()), None)
    if counters is None:
        raise RuntimeError("no network interface counters available")

    return NetworkCounters(bytes_sent=counters.bytes_sent, bytes_recv=counters.bytes_recv)
