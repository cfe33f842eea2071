"""
Lifecycle component - activation and uninstall.
"""

from .component import ACTIVATION_DEFAULTS, run, run_activate, run_uninstall
from .models import ActivateInput, ActivateOutput, UninstallInput, UninstallOutput

__all__ = [
    "run",
    "run_activate",
    "run_uninstall",
    "ACTIVATION_DEFAULTS",
    "ActivateInput",
    "ActivateOutput",
    "UninstallInput",
    "UninstallOutput",
]
