"""Persisted access to a user-authorized installation directory.

When automatic discovery finds nothing, the user may point dnhealth at
an installation directory explicitly. That choice is stored as a small
TOML token in the state directory so later scans can reuse it. Any
filesystem access through the token happens inside ``access()``, which
acquires and releases it.
"""

import logging
import os
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w

from dnhealth.core.paths import get_authorized_dir_path

logger = logging.getLogger(__name__)


class AuthorizationError(Exception):
    """Raised when the authorized directory token cannot be stored."""


class AuthorizedDirectoryStore:
    """Durable token for one user-authorized directory.

    Example:
        >>> store = AuthorizedDirectoryStore()
        >>> store.save(Path("/usr/local/share/dotnet"))
        >>> root = store.resolve()
        >>> with store.access(root):
        ...     records = await discover(root, settings)
    """

    def __init__(self, token_path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            token_path: Where the token is persisted. Defaults to the
                state directory.
        """
        self.token_path = token_path or get_authorized_dir_path()
        self._current: Path | None = None
        self._active = False

    @property
    def has_active_access(self) -> bool:
        """Check if access is currently held."""
        return self._active

    def resolve(self) -> Path | None:
        """Resolve the persisted token to a directory path.

        A token whose directory no longer exists, or that cannot be
        read, is discarded.

        Returns:
            The authorized directory, or None if there is none.
        """
        if self._current is not None:
            return self._current

        try:
            with open(self.token_path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return None
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Discarding unreadable authorization token %s: %s", self.token_path, e)
            self.forget()
            return None

        raw = data.get("path")
        if not isinstance(raw, str) or not raw:
            logger.warning("Discarding malformed authorization token %s", self.token_path)
            self.forget()
            return None

        path = Path(raw)
        if not path.is_dir():
            logger.info("Authorized directory %s no longer exists, forgetting it", path)
            self.forget()
            return None

        self._current = path
        return path

    def save(self, path: Path) -> Path:
        """Persist a directory as the authorized one.

        Args:
            path: Directory the user authorized.

        Returns:
            Path of the token file.

        Raises:
            AuthorizationError: If the token cannot be written.
        """
        resolved = path.expanduser().resolve()
        tmp_path: Path | None = None
        try:
            self.token_path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="wb",
                dir=self.token_path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                tomli_w.dump({"path": str(resolved)}, f)
            os.replace(str(tmp_path), str(self.token_path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise AuthorizationError(f"Failed to store authorized directory: {e}") from e

        self._current = resolved
        logger.debug("Authorized %s", resolved)
        return self.token_path

    def forget(self) -> None:
        """Remove the persisted token."""
        self._current = None
        try:
            self.token_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Failed to remove authorization token %s: %s", self.token_path, e)

    def start_access(self, path: Path) -> bool:
        """Acquire access to an authorized directory.

        Returns:
            True if access is held after the call.
        """
        if self.has_active_access:
            return True
        if not os.access(path, os.R_OK | os.X_OK):
            logger.warning("No read access to %s", path)
            return False
        self._active = True
        return True

    def stop_access(self) -> None:
        """Release access acquired with start_access()."""
        self._active = False

    @contextmanager
    def access(self, path: Path) -> Iterator[bool]:
        """Hold access to a directory for the duration of the block.

        Nested use keeps the outer acquisition; only the outermost block
        releases it.

        Yields:
            Whether access was granted.
        """
        already_active = self.has_active_access
        granted = self.start_access(path)
        try:
            yield granted
        finally:
            if granted and not already_active:
                self.stop_access()
