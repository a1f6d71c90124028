"""
System detection module for rpidetect

Provides the host environment abstraction and the Raspberry Pi detector.
"""

from .host import HostEnvironment, DEFAULT_CPUINFO_PATH
from .raspberry import (
    RaspberryDetector,
    UNKNOWN_MODEL,
    get_raspberry_pi_model,
    is_raspberry_pi,
)

__all__ = [
    "HostEnvironment",         # OS name and /proc/cpuinfo access
    "RaspberryDetector",       # Raspberry Pi specific
    "DEFAULT_CPUINFO_PATH",
    "UNKNOWN_MODEL",
    "get_raspberry_pi_model",
    "is_raspberry_pi",
]
