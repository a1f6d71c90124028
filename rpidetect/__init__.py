"""
rpidetect - Raspberry Pi host detection

Small embeddable utility telling whether the current host is a Raspberry Pi
and, when it is, which processor model /proc/cpuinfo reports.
"""

__version__ = "1.0.0"
__author__ = "rpidetect contributors"
__license__ = "Apache-2.0"

from .systems import (
    HostEnvironment,
    RaspberryDetector,
    get_raspberry_pi_model,
    is_raspberry_pi,
)

__all__ = [
    "HostEnvironment",
    "RaspberryDetector",
    "get_raspberry_pi_model",
    "is_raspberry_pi",
]
