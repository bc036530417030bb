"""dotnet CLI scanner implementation.

Lists installed SDKs, runtimes and the host version by invoking the
dotnet executable with --list-sdks, --list-runtimes and --info.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from dnhealth.models.installation import InstallationKind, InstallationRecord
from dnhealth.scanners.base import Scanner
from dnhealth.utils.shell import run_command

logger = logging.getLogger(__name__)

_HOST_HEADERS = ("Host:", "Host (useful for support)")
_HOST_SECTION_END = (".NET", "Runtime Environment:")
_VERSION_PREFIX = "Version:"


def find_executable(candidates: Sequence[Path]) -> Path | None:
    """Return the first candidate path that exists.

    Args:
        candidates: Absolute paths in probe order.

    Returns:
        The first existing path, or None if none exist.
    """
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def parse_sdk_output(output: str) -> list[InstallationRecord]:
    """Parse `dotnet --list-sdks` output.

    Each line looks like ``8.0.404 [/usr/local/share/dotnet/sdk]``.

    Args:
        output: Captured standard output.

    Returns:
        One SDK record per non-empty line.
    """
    records: list[InstallationRecord] = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        version = line.split(" ", 1)[0]
        records.append(InstallationRecord(version=version, kind=InstallationKind.SDK))
    return records


def parse_runtime_output(output: str) -> list[InstallationRecord]:
    """Parse `dotnet --list-runtimes` output.

    Each line looks like
    ``Microsoft.NETCore.App 8.0.10 [/usr/local/share/dotnet/shared/Microsoft.NETCore.App]``.

    Args:
        output: Captured standard output.

    Returns:
        One runtime record per line with at least a product and a version.
    """
    records: list[InstallationRecord] = []
    for line in output.splitlines():
        parts = line.split(maxsplit=2)
        if len(parts) < 2:
            if line.strip():
                logger.debug("Skipping malformed runtime line: %r", line[:100])
            continue
        product, version = parts[0], parts[1]
        records.append(
            InstallationRecord(version=version, kind=InstallationKind.RUNTIME, product=product)
        )
    return records


def parse_host_from_info(output: str) -> list[InstallationRecord]:
    """Extract the host version from `dotnet --info` output.

    Looks for the "Host:" section (or the older "Host (useful for
    support):" header) and takes its first "Version:" line. The section
    ends at a line starting with ".NET" or "Runtime Environment:".

    Args:
        output: Captured standard output.

    Returns:
        A single host record, or an empty list if no host version is present.
    """
    in_host_section = False

    for raw_line in output.splitlines():
        line = raw_line.strip()

        if line.startswith(_HOST_HEADERS):
            in_host_section = True
            continue

        if not in_host_section:
            continue

        if line.startswith(_VERSION_PREFIX):
            version = line.split(":", 1)[1].strip()
            if not version:
                return []
            return [InstallationRecord(version=version, kind=InstallationKind.HOST)]

        if line.startswith(_HOST_SECTION_END):
            break

    return []


class DotnetCliScanner(Scanner):
    """Scanner backed by the dotnet command line tool.

    The three invocations run one after another and fail independently:
    a non-zero exit, a spawn failure or a timeout only drops the records
    that invocation would have produced.
    """

    def __init__(self, executable: Path, *, timeout: float | None = 60.0) -> None:
        """Initialize the scanner.

        Args:
            executable: Path to the dotnet executable.
            timeout: Limit in seconds for each invocation.
        """
        self.executable = executable
        self.timeout = timeout

    @property
    def strategy(self) -> str:
        """Return 'cli' as the strategy name."""
        return "cli"

    def is_available(self) -> bool:
        """Check if the executable exists."""
        return self.executable.exists()

    async def scan(self) -> list[InstallationRecord]:
        """Query SDKs, runtimes and the host version.

        Returns:
            SDK records, then runtime records, then at most one host record.
        """
        records: list[InstallationRecord] = []
        records.extend(parse_sdk_output(await self._run("--list-sdks")))
        records.extend(parse_runtime_output(await self._run("--list-runtimes")))
        records.extend(parse_host_from_info(await self._run("--info")))
        logger.debug("dotnet CLI reported %d records", len(records))
        return records

    async def _run(self, flag: str) -> str:
        """Run the executable with a single flag.

        Args:
            flag: Command line flag to pass.

        Returns:
            Captured standard output, or an empty string on any failure.
        """
        try:
            result = await run_command([str(self.executable), flag], timeout=self.timeout)
        except TimeoutError:
            logger.warning("%s %s timed out after %ss", self.executable, flag, self.timeout)
            return ""
        except OSError as e:
            logger.debug("Failed to run %s %s: %s", self.executable, flag, e)
            return ""

        if not result.success:
            logger.debug("%s %s exited with %d", self.executable, flag, result.returncode)
            return ""

        return result.stdout
