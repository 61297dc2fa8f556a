"""Eigen solver backends."""

from pylinalg.eigen.backends.cpu import CPUShiftedQRBackend

__all__ = ["CPUShiftedQRBackend"]
