"""Get hgctl home directory path or path under it."""

import os
from pathlib import Path

from ...constants import HGCTL_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Return ``$HGCTL_HOME`` (default ``~/.hgctl``), joined with ``parts`` if given.

    Examples:
        >>> get_home_dir("logs", "hgctl.log")
        Path("/root/.hgctl/logs/hgctl.log")
    """
    hgctl_home_env = os.environ.get("HGCTL_HOME")
    hgctl_home = Path(hgctl_home_env).expanduser().resolve() if hgctl_home_env else Path.home() / HGCTL_HOME_EXT
    return hgctl_home / Path(*parts) if parts else hgctl_home
