"""
Raspberry Pi system detector

Identifies a Raspberry Pi from the Broadcom SoC named on the "Hardware" line
of /proc/cpuinfo, and reports the processor model from the "model name" line.
"""

import logging
from typing import Dict, Optional

from .host import HostEnvironment

HARDWARE_PREFIX = "Hardware"
MODEL_NAME_PREFIX = "model name"
UNKNOWN_MODEL = "Raspberry Pi (model unknown)"

# Broadcom SoC identifiers used across Raspberry Pi generations
RASPBERRY_PI_HARDWARE_MARKERS = (
    "BCM2708",
    "BCM2709",
    "BCM2710",
    "BCM2711",
    "BCM2835",
    "BCM2836",
    "BCM2837",
    "BCM2838",
)


def _line_value(line: str) -> Optional[str]:
    """Return the trimmed text after the first ':' or None when there is none"""
    _, sep, value = line.partition(":")
    if not sep:
        return None
    return value.strip()


class RaspberryDetector:
    """Raspberry Pi detection"""

    system_type = "raspberry"

    def __init__(self, host: Optional[HostEnvironment] = None):
        self.host = host if host is not None else HostEnvironment()

    def is_linux(self) -> bool:
        """
        Check the OS family

        Returns:
            bool: True if the OS name contains 'linux'
        """
        return "linux" in self.host.get_os_name().lower()

    def is_raspberry_pi(self) -> bool:
        """
        Detect if running on Raspberry Pi

        Returns:
            bool: True if Raspberry Pi detected
        """
        if not self.is_linux():
            return False

        try:
            if not self.host.cpuinfo_exists():
                logging.debug("CPU info not found, not a Raspberry Pi")
                return False
            cpuinfo = self.host.read_cpuinfo()
        except OSError as e:
            logging.debug(f"Error reading cpuinfo: {e}")
            return False

        if self.contains_raspberry_pi_hardware(cpuinfo):
            logging.debug("Raspberry Pi detected via cpuinfo")
            return True
        return False

    def get_raspberry_pi_model(self) -> str:
        """
        Get the Raspberry Pi model string

        Returns:
            str: Model name, UNKNOWN_MODEL if it cannot be determined,
                 or an empty string when not running on a Raspberry Pi
        """
        if not self.is_raspberry_pi():
            return ""
        return self._read_model()

    def _read_model(self) -> str:
        """Re-read CPU info of a host already identified as a Raspberry Pi"""
        try:
            cpuinfo = self.host.read_cpuinfo()
        except OSError as e:
            logging.debug(f"Error re-reading cpuinfo for model: {e}")
            return UNKNOWN_MODEL

        return self.extract_model_info(cpuinfo)

    @staticmethod
    def contains_raspberry_pi_hardware(cpuinfo: str) -> bool:
        """
        Check CPU info for a Raspberry Pi SoC on a "Hardware" line

        The key is matched as a line prefix, so "Hardware2 : BCM2835" counts.
        Lines without a ':' separator are ignored.

        Args:
            cpuinfo: Raw /proc/cpuinfo text

        Returns:
            bool: True if a known marker is found
        """
        for line in cpuinfo.split("\n"):
            if not line.startswith(HARDWARE_PREFIX):
                continue
            hardware = _line_value(line)
            if hardware is None:
                logging.debug(f"Ignoring malformed hardware line: {line!r}")
                continue
            if any(marker in hardware for marker in RASPBERRY_PI_HARDWARE_MARKERS):
                return True
        return False

    @staticmethod
    def extract_model_info(cpuinfo: str) -> str:
        """
        Extract the first "model name" value from CPU info

        Args:
            cpuinfo: Raw /proc/cpuinfo text

        Returns:
            str: Model name, or UNKNOWN_MODEL when absent
        """
        for line in cpuinfo.split("\n"):
            if not line.startswith(MODEL_NAME_PREFIX):
                continue
            model = _line_value(line)
            if model is None:
                logging.debug(f"Ignoring malformed model line: {line!r}")
                continue
            return model
        return UNKNOWN_MODEL

    def get_system_info(self) -> Dict:
        """
        Get Raspberry Pi detection details

        Returns:
            Dict: Detection result, model and the inputs used
        """
        detected = self.is_raspberry_pi()
        return {
            "type": self.system_type,
            "os_name": self.host.get_os_name(),
            "cpuinfo_path": str(getattr(self.host, "cpuinfo_path", "")),
            "is_raspberry_pi": detected,
            "model": self._read_model() if detected else "",
        }


def is_raspberry_pi() -> bool:
    """Check the current host with the default environment"""
    return RaspberryDetector().is_raspberry_pi()


def get_raspberry_pi_model() -> str:
    """Get the model of the current host with the default environment"""
    return RaspberryDetector().get_raspberry_pi_model()
