"""
Handoff dispatcher — exec the helper with the target's registry
coordinates in its environment.

The environment is built as an explicit bundle and given to the exec
adapter; ``os.environ`` of this process is never modified. On success
control never comes back.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, NoReturn

from hab_export.core.config.loader import BLDR_CHANNEL_ENVVAR, BLDR_URL_ENVVAR
from hab_export.core.errors import ExecCommandNotFound
from hab_export.core.models import PackageIdent, PackageInstall
from hab_export.core.services.export.presence import load_package

if TYPE_CHECKING:
    from hab_export.adapters.base import ProcessExec

logger = logging.getLogger(__name__)


def handoff_env(
    url: str,
    channel: str,
    install: PackageInstall | None = None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Environment for the helper process.

    ``base`` (default ``os.environ``) is copied, the target registry
    URL and channel are set, and the helper's binary directories are
    put first on ``PATH``.
    """
    env = dict(os.environ if base is None else base)
    env[BLDR_URL_ENVVAR] = url
    env[BLDR_CHANNEL_ENVVAR] = channel
    if install is not None:
        dirs = [str(d) for d in install.bin_dirs()]
        if env.get("PATH"):
            dirs.append(env["PATH"])
        env["PATH"] = os.pathsep.join(dirs)
    return env


def find_command(install: PackageInstall, command: str) -> Path:
    """Path of ``command`` inside the package's binary directories.

    Raises:
        ExecCommandNotFound: No executable of that name in the package.
    """
    for directory in install.bin_dirs():
        candidate = directory / command
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return candidate
    raise ExecCommandNotFound(command)


def handoff(
    process: ProcessExec,
    helper: PackageIdent,
    command: str,
    target: PackageIdent,
    url: str,
    channel: str,
    fs_root: Path | None = None,
    base_env: Mapping[str, str] | None = None,
) -> NoReturn:
    """Replace this process with ``command`` from ``helper``.

    The helper receives the target ident as its only argument and the
    target registry URL/channel through its environment.

    Raises:
        PackageNotFound: The helper is not installed.
        ExecCommandNotFound: The helper does not provide ``command``.
        OSError: The exec itself failed.
    """
    install = load_package(helper, fs_root)
    path = find_command(install, command)
    env = handoff_env(url, channel, install=install, base=base_env)

    logger.info("Handing off to %s %s (%s=%s, %s=%s)",
                command, target, BLDR_URL_ENVVAR, url, BLDR_CHANNEL_ENVVAR, channel)
    process.exec(path, [command, str(target)], env)
