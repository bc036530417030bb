"""Release catalog client.

Fetches the official .NET releases index and derives the tracked
release lines (Current, Previous, LTS or Unsupported) from it. When the
fetch fails the static fallback catalog is used instead.
"""

import logging
import re
from typing import Annotated

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dnhealth.core.version import major_version
from dnhealth.models.catalog import CatalogSnapshot, TrackedLine

logger = logging.getLogger(__name__)

# Runtime channels are "<major>.<minor>"; anything deeper is a different product
_CHANNEL_PATTERN = re.compile(r"^\d+\.\d+$")

SUPPORTED_PHASE = "active"
LTS_RELEASE_TYPE = "lts"


class CatalogError(Exception):
    """Base exception for release catalog errors."""


class CatalogNetworkError(CatalogError):
    """Raised when the releases index cannot be downloaded."""


class CatalogParseError(CatalogError):
    """Raised when the releases index cannot be decoded."""


class ReleaseChannel(BaseModel):
    """One entry of the releases index."""

    model_config = ConfigDict(populate_by_name=True)

    channel_version: Annotated[str, Field(alias="channel-version")]
    latest_sdk: Annotated[str, Field(alias="latest-sdk")]
    support_phase: Annotated[str, Field(alias="support-phase")]
    release_type: Annotated[str, Field(alias="release-type")]
    latest_release: Annotated[str | None, Field(alias="latest-release")] = None
    latest_runtime: Annotated[str | None, Field(alias="latest-runtime")] = None
    eol_date: Annotated[str | None, Field(alias="eol-date")] = None

    @property
    def is_supported(self) -> bool:
        """Check if the channel is in active support."""
        return self.support_phase == SUPPORTED_PHASE

    @property
    def is_long_term_support(self) -> bool:
        """Check if the channel is an LTS release."""
        return self.release_type == LTS_RELEASE_TYPE

    @property
    def major_version(self) -> int:
        """Major version of the channel."""
        return major_version(self.channel_version)

    def to_tracked_line(self, label: str) -> TrackedLine:
        """Build a tracked line for this channel under the given label."""
        return TrackedLine(
            major_version=self.major_version,
            latest_version=self.latest_sdk,
            label=label,
            is_supported=self.is_supported,
            is_long_term_support=self.is_long_term_support,
        )


class ReleasesIndex(BaseModel):
    """Top-level releases index document."""

    model_config = ConfigDict(populate_by_name=True)

    releases_index: Annotated[list[ReleaseChannel], Field(alias="releases-index")]


def is_runtime_channel(channel: ReleaseChannel) -> bool:
    """Check if a channel identifier is a plain '<major>.<minor>' runtime channel."""
    return _CHANNEL_PATTERN.match(channel.channel_version) is not None


def select_tracked_lines(channels: list[ReleaseChannel]) -> list[TrackedLine]:
    """Derive the tracked release lines from the releases index.

    The newest channel is "Current" and the one after it "Previous".
    If either of those is LTS, the third channel is tracked as well
    ("Previous" while supported, "Unsupported" otherwise). Otherwise the
    newest supported LTS channel older than both is tracked as "LTS".

    Args:
        channels: Channels from the releases index, in any order.

    Returns:
        Up to three tracked lines, newest first.
    """
    releases = sorted(
        (c for c in channels if is_runtime_channel(c)),
        key=lambda c: c.major_version,
        reverse=True,
    )
    if not releases:
        return []

    tracked = [releases[0].to_tracked_line("Current")]
    if len(releases) > 1:
        tracked.append(releases[1].to_tracked_line("Previous"))

    if len(releases) > 2:
        if any(line.is_long_term_support for line in tracked):
            third = releases[2]
            label = "Previous" if third.is_supported else "Unsupported"
            tracked.append(third.to_tracked_line(label))
        else:
            for release in releases[3:]:
                if release.is_long_term_support and release.is_supported:
                    tracked.append(release.to_tracked_line("LTS"))
                    break

    return tracked


def parse_releases_index(content: bytes | str) -> list[ReleaseChannel]:
    """Decode a releases index document.

    Args:
        content: Raw JSON document.

    Returns:
        The channels listed in the document.

    Raises:
        CatalogParseError: If the document is not valid JSON or does not
            match the expected schema.
    """
    try:
        return ReleasesIndex.model_validate_json(content).releases_index
    except ValidationError as e:
        raise CatalogParseError(f"Failed to parse releases index: {e}") from e


class ReleaseCatalogClient:
    """Client for the official .NET releases index.

    Example:
        >>> client = ReleaseCatalogClient()
        >>> lines = await client.fetch_tracked_lines()
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Location of the releases index JSON document.
            timeout: Request timeout in seconds (None for no limit).
            transport: Optional transport override, used by tests.
        """
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch_releases(self) -> list[ReleaseChannel]:
        """Download and decode the releases index.

        Raises:
            CatalogNetworkError: On an unusable URL, transport failure or a
                non-200 response.
            CatalogParseError: If the response body cannot be decoded.
        """
        logger.debug("Fetching releases index from %s", self.url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(self.url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise CatalogNetworkError(f"Unable to fetch releases index: {e}") from e

        if response.status_code != httpx.codes.OK:
            msg = f"Unable to fetch releases index: HTTP {response.status_code}"
            raise CatalogNetworkError(msg)

        return parse_releases_index(response.content)

    async def fetch_tracked_lines(self) -> list[TrackedLine]:
        """Fetch the releases index and derive the tracked lines.

        Raises:
            CatalogNetworkError: On transport failure or a non-200 response.
            CatalogParseError: If the response body cannot be decoded.
        """
        return select_tracked_lines(await self.fetch_releases())


async def refresh_catalog(client: ReleaseCatalogClient | None) -> CatalogSnapshot:
    """Produce the catalog snapshot for a scan.

    Args:
        client: Catalog client, or None to skip the fetch (offline mode).

    Returns:
        A live snapshot when the fetch succeeds, the fallback snapshot otherwise.
    """
    if client is None:
        return CatalogSnapshot.fallback("offline mode")

    try:
        lines = await client.fetch_tracked_lines()
    except CatalogError as e:
        logger.warning("Failed to fetch latest versions: %s", e)
        return CatalogSnapshot.fallback(str(e))

    if not lines:
        logger.warning("Releases index contained no runtime channels")
        return CatalogSnapshot.fallback("releases index contained no runtime channels")

    logger.debug("Tracking %s", ", ".join(f"{ln.label} {ln.major_version}" for ln in lines))
    return CatalogSnapshot.live(lines)
