"""Health analysis of discovered installations.

Joins installed SDKs, grouped by major version, against the tracked
release lines.
"""

from collections import defaultdict
from collections.abc import Sequence

from dnhealth.core.version import Ordering, compare, find_highest
from dnhealth.models.catalog import TrackedLine
from dnhealth.models.health import OTHER_LABEL, HealthStatus, HealthVerdict
from dnhealth.models.installation import InstallationRecord


def group_sdks_by_major(records: Sequence[InstallationRecord]) -> dict[int, list[str]]:
    """Group SDK versions by major version.

    Args:
        records: Discovered records of any kind.

    Returns:
        Mapping of major version to SDK version strings, in input order.
    """
    groups: dict[int, list[str]] = defaultdict(list)
    for record in records:
        if record.is_sdk:
            groups[record.major_version].append(record.version)
    return dict(groups)


def _verdict_for_line(line: TrackedLine, installed: list[str]) -> HealthVerdict:
    if not installed:
        return HealthVerdict(
            major_version=line.major_version,
            label=line.label,
            expected_version=line.latest_version,
            status=HealthStatus.MISSING,
        )

    highest = find_highest(installed)

    if not line.is_supported:
        status = HealthStatus.UNSUPPORTED
    elif compare(highest, line.latest_version) == Ordering.LESS:
        status = HealthStatus.OUT_OF_DATE
    else:
        status = HealthStatus.HEALTHY

    return HealthVerdict(
        major_version=line.major_version,
        label=line.label,
        expected_version=line.latest_version,
        installed_version=highest,
        status=status,
    )


def analyze(
    records: Sequence[InstallationRecord],
    tracked: Sequence[TrackedLine],
) -> list[HealthVerdict]:
    """Compute health verdicts for the tracked lines and any other installs.

    Only SDK records are considered. Each tracked line gets one verdict,
    in catalog order. Every other major version with at least one SDK
    installed follows as an "Other" verdict, newest first.

    Args:
        records: Discovered installation records.
        tracked: Tracked release lines in catalog order.

    Returns:
        Tracked-line verdicts followed by "Other" verdicts.
    """
    groups = group_sdks_by_major(records)
    verdicts = [_verdict_for_line(line, groups.get(line.major_version, [])) for line in tracked]

    tracked_majors = {line.major_version for line in tracked}
    for major in sorted(groups.keys() - tracked_majors, reverse=True):
        verdicts.append(
            HealthVerdict(
                major_version=major,
                label=OTHER_LABEL,
                installed_version=find_highest(groups[major]),
                status=HealthStatus.HEALTHY,
            )
        )

    return verdicts
