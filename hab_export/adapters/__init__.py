"""
Adapters — installer and process-exec implementations.
"""

from hab_export.adapters.base import Installer, ProcessExec
from hab_export.adapters.installer import CommandInstaller
from hab_export.adapters.process import ExecveProcess

__all__ = [
    "CommandInstaller",
    "ExecveProcess",
    "Installer",
    "ProcessExec",
]
