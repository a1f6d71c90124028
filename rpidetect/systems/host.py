"""
Host environment access for rpidetect

Wraps the two things detection needs from the running system: the OS name
and the CPU information pseudo-file. Detectors receive an instance of this
class (or any object with the same methods) instead of reading global state.
"""

import logging
import platform
from pathlib import Path
from typing import Optional, Union

DEFAULT_CPUINFO_PATH = Path("/proc/cpuinfo")


class HostEnvironment:
    """OS name provider and CPU info reader for the running host"""

    def __init__(self, cpuinfo_path: Optional[Union[str, Path]] = None):
        if cpuinfo_path is None:
            cpuinfo_path = DEFAULT_CPUINFO_PATH
        self.cpuinfo_path = Path(cpuinfo_path)

    def get_os_name(self) -> str:
        """
        Get the OS name

        Returns:
            str: OS name in lowercase ('linux', 'windows', 'darwin', ...)
        """
        return platform.system().lower()

    def cpuinfo_exists(self) -> bool:
        try:
            return self.cpuinfo_path.exists()
        except OSError as e:
            # Path under a directory we may not search
            logging.debug(f"Cannot check {self.cpuinfo_path}: {type(e).__name__}")
            return False

    def read_cpuinfo(self) -> str:
        """
        Read the whole CPU info document

        Returns:
            str: File contents

        Raises:
            OSError: If the file cannot be read
        """
        with open(self.cpuinfo_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def __repr__(self):
        return f"{self.__class__.__name__}(cpuinfo_path={str(self.cpuinfo_path)!r})"
