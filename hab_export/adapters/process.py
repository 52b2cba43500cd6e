"""
Process exec — replace this process with the helper.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, NoReturn

from hab_export.adapters.base import ProcessExec

logger = logging.getLogger(__name__)


class ExecveProcess(ProcessExec):
    """``os.execve`` with an explicit environment."""

    def exec(self, path: Path, argv: list[str], env: Mapping[str, str]) -> NoReturn:
        logger.debug("exec %s %s", path, argv[1:])
        # Anything buffered would be lost with the process image
        sys.stdout.flush()
        sys.stderr.flush()
        os.execve(str(path), argv, dict(env))
