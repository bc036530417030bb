"""dnhealth - .NET installation health audit.

Discovers locally installed .NET SDKs, runtimes and hosts and checks
them against the currently tracked release lines.
"""

__version__ = "0.1.0"
