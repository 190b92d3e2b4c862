"""Installation detectors.

This module provides one detector per installation method and the
cascade that consults them in order.
"""

from wsctl.detectors.apt import AptDetector
from wsctl.detectors.aqua import AquaDetector
from wsctl.detectors.base import Detector
from wsctl.detectors.binary import BinaryDetector
from wsctl.detectors.cascade import DetectionCascade
from wsctl.detectors.flatpak import FlatpakDetector, is_flatpak_app_id
from wsctl.detectors.mise import MiseDetector
from wsctl.detectors.snap import SnapDetector

__all__ = [
    "AptDetector",
    "AquaDetector",
    "BinaryDetector",
    "DetectionCascade",
    "Detector",
    "FlatpakDetector",
    "MiseDetector",
    "SnapDetector",
    "is_flatpak_app_id",
]
