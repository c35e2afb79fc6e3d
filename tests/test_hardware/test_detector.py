"""Tests for individual host metric queries."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from ngfetch.hardware.detector import (
    CPUInfo,
    HostInfo,
    NetworkCounters,
    detect_cpu,
    detect_disk_bytes,
    detect_host,
    detect_memory_bytes,
    detect_network,
    detect_platform,
)


class TestDetectPlatform:
    @patch("ngfetch.hardware.detector.platform")
    def test_linux_os_release(self, mock_platform):
        mock_platform.system.return_value = "Linux"
        mock_platform.freedesktop_os_release.return_value = {
            "ID": "ubuntu",
            "VERSION_ID": "22.04",
        }
        assert detect_platform() == ("ubuntu", "22.04")

    @patch("ngfetch.hardware.detector.platform")
    def test_linux_without_os_release(self, mock_platform):
        mock_platform.system.return_value = "Linux"
        mock_platform.freedesktop_os_release.side_effect = OSError("missing")
        mock_platform.release.return_value = "6.8.0"
        assert detect_platform() == ("linux", "6.8.0")

    @patch("ngfetch.hardware.detector.platform")
    def test_macos(self, mock_platform):
        mock_platform.system.return_value = "Darwin"
        mock_platform.mac_ver.return_value = ("14.2", ("", "", ""), "arm64")
        assert detect_platform() == ("darwin", "14.2")

    @patch("ngfetch.hardware.detector.platform")
    def test_other_system(self, mock_platform):
        mock_platform.system.return_value = "Windows"
        mock_platform.release.return_value = "11"
        assert detect_platform() == ("windows", "11")

    def test_real_system_returns_strings(self):
        name, version = detect_platform()
        assert isinstance(name, str) and name != ""
        assert isinstance(version, str)


class TestDetectHost:
    @patch("ngfetch.hardware.detector.time")
    @patch("ngfetch.hardware.detector.socket")
    @patch("ngfetch.hardware.detector.psutil")
    @patch("ngfetch.hardware.detector.detect_platform", return_value=("debian", "12"))
    def test_host_fields(self, mock_platform, mock_psutil, mock_socket, mock_time):
        mock_psutil.boot_time.return_value = 1000.0
        mock_time.time.return_value = 4600.0
        mock_socket.gethostname.return_value = "workstation"

        with patch("ngfetch.hardware.detector.platform.release", return_value="6.1.0-18-amd64"):
            host = detect_host()

        assert isinstance(host, HostInfo)
        assert host.platform == "debian"
        assert host.platform_version == "12"
        assert host.kernel == "6.1.0-18-amd64"
        assert host.hostname == "workstation"
        assert host.uptime_seconds == 3600.0

    @patch("ngfetch.hardware.detector.time")
    @patch("ngfetch.hardware.detector.psutil")
    def test_uptime_never_negative(self, mock_psutil, mock_time):
        # Clock skew can put boot time in the future
        mock_psutil.boot_time.return_value = 5000.0
        mock_time.time.return_value = 4000.0
        assert detect_host().uptime_seconds == 0.0


class TestDetectCPU:
    @patch("ngfetch.hardware.detector.psutil")
    @patch("ngfetch.hardware.detector.cpuinfo")
    def test_brand_and_cores(self, mock_cpuinfo, mock_psutil):
        mock_cpuinfo.get_cpu_info.return_value = {"brand_raw": "AMD Ryzen 9 7950X 16-Core Processor"}
        mock_psutil.cpu_count.return_value = 32

        cpu = detect_cpu()
        assert cpu == CPUInfo(model="AMD Ryzen 9 7950X 16-Core Processor", cores=32)
        mock_psutil.cpu_count.assert_called_once_with(logical=True)

    @patch("ngfetch.hardware.detector.psutil")
    @patch("ngfetch.hardware.detector.cpuinfo")
    def test_falls_back_to_platform_processor(self, mock_cpuinfo, mock_psutil):
        mock_cpuinfo.get_cpu_info.return_value = {}
        mock_psutil.cpu_count.return_value = 4
        with patch("ngfetch.hardware.detector.platform.processor", return_value="arm"):
            assert detect_cpu().model == "arm"

    @patch("ngfetch.hardware.detector.psutil")
    @patch("ngfetch.hardware.detector.cpuinfo")
    def test_unknown_model(self, mock_cpuinfo, mock_psutil):
        mock_cpuinfo.get_cpu_info.return_value = {"brand_raw": ""}
        mock_psutil.cpu_count.return_value = 2
        with patch("ngfetch.hardware.detector.platform.processor", return_value=""):
            assert detect_cpu().model == "Unknown"

    @patch("ngfetch.hardware.detector.psutil")
    @patch("ngfetch.hardware.detector.cpuinfo")
    def test_missing_core_count_raises(self, mock_cpuinfo, mock_psutil):
        mock_cpuinfo.get_cpu_info.return_value = {"brand_raw": "Some CPU"}
        mock_psutil.cpu_count.return_value = None
        with pytest.raises(RuntimeError, match="CPU count"):
            detect_cpu()


class TestDetectMemoryAndDisk:
    @patch("ngfetch.hardware.detector.psutil")
    def test_memory_total(self, mock_psutil):
        mock_psutil.virtual_memory.return_value = MagicMock(total=17179869184)
        assert detect_memory_bytes() == 17179869184

    @patch("ngfetch.hardware.detector.psutil")
    def test_disk_uses_path(self, mock_psutil):
        mock_psutil.disk_usage.return_value = MagicMock(total=512 * (1 << 30))
        assert detect_disk_bytes("/data") == 512 * (1 << 30)
        mock_psutil.disk_usage.assert_called_once_with("/data")

    @patch("ngfetch.hardware.detector.psutil")
    def test_disk_error_propagates(self, mock_psutil):
        mock_psutil.disk_usage.side_effect = PermissionError("denied")
        with pytest.raises(PermissionError):
            detect_disk_bytes("/root")

    def test_real_memory_positive(self):
        assert detect_memory_bytes() > 0


class TestDetectNetwork:
    @patch("ngfetch.hardware.detector.psutil")
    def test_aggregate_counters(self, mock_psutil):
        mock_psutil.net_io_counters.return_value = SimpleNamespace(bytes_sent=2048, bytes_recv=4096)
        assert detect_network() == NetworkCounters(bytes_sent=2048, bytes_recv=4096)

    @patch("ngfetch.hardware.detector.psutil")
    def test_per_interface_takes_first(self, mock_psutil):
        mock_psutil.net_io_counters.return_value = {
            "eth0": SimpleNamespace(bytes_sent=10, bytes_recv=20),
            "wlan0": SimpleNamespace(bytes_sent=30, bytes_recv=40),
        }
        assert detect_network() == NetworkCounters(bytes_sent=10, bytes_recv=20)

    @patch("ngfetch.hardware.detector.psutil")
    def test_no_counters_raises(self, mock_psutil):
        mock_psutil.net_io_counters.return_value = None
        with pytest.raises(RuntimeError, match="no network"):
            detect_network()
