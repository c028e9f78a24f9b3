"""
Shared compute infrastructure for PyVecMat.

Submodules:
    device: Hardware detection and device selection for the torch engine
    tolerances: Comparison tolerances per engine precision
"""

from pyvecmat.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pyvecmat.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
