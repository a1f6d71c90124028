import pytest

PI_CPUINFO = (
    "processor\t: 0\n"
    "model name\t: ARMv7 Processor rev 3 (v7l)\n"
    "BogoMIPS\t: 38.40\n"
    "Features\t: half thumb fastmult vfp edsp neon vfpv3 tls vfpv4 idiva idivt vfpd32 lpae evtstrm crc32\n"
    "CPU implementer\t: 0x41\n"
    "CPU architecture: 7\n"
    "CPU variant\t: 0x0\n"
    "CPU part\t: 0xd08\n"
    "CPU revision\t: 3\n"
    "Hardware\t: BCM2835\n"
    "Revision\t: c03111\n"
    "Serial\t\t: 10000000abcdef01\n"
)

INTEL_CPUINFO = (
    "processor\t: 0\n"
    "vendor_id\t: GenuineIntel\n"
    "cpu family\t: 6\n"
    "model\t\t: 142\n"
    "model name\t: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz\n"
    "stepping\t: 11\n"
    "Hardware\t: Intel Corporation\n"
)


class FakeHost:
    """In-memory host environment; reads fail after `ok_reads` successful ones"""

    def __init__(self, os_name="linux", cpuinfo=None, ok_reads=None, exists_error=None):
        self.os_name = os_name
        self.exists_error = exists_error
        self.cpuinfo = cpuinfo
        self.ok_reads = ok_reads
        self.cpuinfo_path = "/fake/cpuinfo"
        self.reads = 0

    def get_os_name(self):
        return self.os_name

    def cpuinfo_exists(self):
        if self.exists_error is not None:
            raise self.exists_error
        return self.cpuinfo is not None

    def read_cpuinfo(self):
        self.reads += 1
        if self.ok_reads is not None and self.reads > self.ok_reads:
            raise OSError("read failed")
        return self.cpuinfo


@pytest.fixture
def pi_cpuinfo_file(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text(PI_CPUINFO)
    return path


@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Linux")
