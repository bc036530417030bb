"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from pathlib import Path

import pytest


@pytest.fixture
def mock_list_sdks_output() -> str:
    """Sample `dotnet --list-sdks` output for testing."""
    return """8.0.404 [/usr/local/share/dotnet/sdk]
9.0.101 [/usr/local/share/dotnet/sdk]
10.0.100 [/usr/local/share/dotnet/sdk]
"""


@pytest.fixture
def mock_list_runtimes_output() -> str:
    """Sample `dotnet --list-runtimes` output for testing."""
    return """Microsoft.AspNetCore.App 8.0.10 [/usr/local/share/dotnet/shared/Microsoft.AspNetCore.App]
Microsoft.NETCore.App 8.0.10 [/usr/local/share/dotnet/shared/Microsoft.NETCore.App]
Microsoft.NETCore.App 9.0.0 [/usr/local/share/dotnet/shared/Microsoft.NETCore.App]
"""


@pytest.fixture
def mock_info_output() -> str:
    """Sample `dotnet --info` output for testing.

    The SDK section also has a Version line, which must not be taken
    as the host version.
    """
    return """.NET SDK:
 Version:           8.0.404
 Commit:            7b190310f2
 Workload version:  8.0.400-manifests.b6724b7a
 MSBuild version:   17.11.9+a69bbaaf5

Runtime Environment:
 OS Name:     Mac OS X
 OS Version:  15.1
 OS Platform: Darwin
 RID:         osx-arm64
 Base Path:   /usr/local/share/dotnet/sdk/8.0.404/

.NET workloads installed:
There are no installed workloads to display.

Host:
  Version:      8.0.10
  Architecture: arm64
  Commit:       81cabf2857

.NET SDKs installed:
  8.0.404 [/usr/local/share/dotnet/sdk]
"""


@pytest.fixture
def mock_legacy_info_output() -> str:
    """Sample `dotnet --info` output from a .NET Core 3.1 host."""
    return """.NET Core SDK (reflecting any global.json):
 Version:   3.1.426
 Commit:    d1ef8ae3fe

Runtime Environment:
 OS Name:     ubuntu
 OS Version:  20.04

Host (useful for support):
  Version: 3.1.32
  Commit:  d6b2ad6f08

.NET Core SDKs installed:
  3.1.426 [/usr/share/dotnet/sdk]
"""


@pytest.fixture
def mock_empty_output() -> str:
    """Empty output for testing edge cases."""
    return ""


@pytest.fixture
def releases_index() -> dict[str, object]:
    """Releases index document shaped like the official one."""

    def channel(version: str, sdk: str, phase: str, release_type: str) -> dict[str, object]:
        return {
            "channel-version": version,
            "latest-release": sdk,
            "latest-release-date": "2025-11-11",
            "security": True,
            "latest-runtime": sdk,
            "latest-sdk": sdk,
            "product": ".NET",
            "support-phase": phase,
            "eol-date": None,
            "release-type": release_type,
            "releases.json": f"https://builds.dotnet.microsoft.com/dotnet/release-metadata/{version}/releases.json",
        }

    return {
        "releases-index": [
            channel("10.0", "10.0.101", "active", "lts"),
            channel("9.0", "9.0.308", "active", "sts"),
            channel("8.0", "8.0.416", "active", "lts"),
            channel("7.0", "7.0.410", "eol", "sts"),
            channel("6.0", "6.0.428", "eol", "lts"),
        ]
    }


@pytest.fixture
def releases_index_json(releases_index: dict[str, object]) -> str:
    """Serialized releases index document."""
    return json.dumps(releases_index)


@pytest.fixture
def dotnet_root(tmp_path: Path) -> Path:
    """Create a .NET installation root with SDKs, hosts and runtimes.

    Layout:
        sdk/8.0.404, sdk/9.0.101, sdk/.DS_Store
        host/fxr/8.0.10, host/fxr/9.0.0
        shared/Microsoft.NETCore.App/8.0.10, 9.0.0
        shared/Microsoft.AspNetCore.App/8.0.10
    """
    root = tmp_path / "dotnet"
    for version in ("8.0.404", "9.0.101"):
        (root / "sdk" / version).mkdir(parents=True)
    (root / "sdk" / ".DS_Store").write_text("")
    for version in ("8.0.10", "9.0.0"):
        (root / "host" / "fxr" / version).mkdir(parents=True)
    for version in ("8.0.10", "9.0.0"):
        (root / "shared" / "Microsoft.NETCore.App" / version).mkdir(parents=True)
    (root / "shared" / "Microsoft.AspNetCore.App" / "8.0.10").mkdir(parents=True)
    return root


@pytest.fixture
def xdg_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, Path]:
    """Point XDG config and state directories at a temporary location."""
    config_home = tmp_path / "config"
    state_home = tmp_path / "state"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_STATE_HOME", str(state_home))
    return {"config": config_home / "dnhealth", "state": state_home / "dnhealth"}
