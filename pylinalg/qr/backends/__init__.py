"""QR backends."""

from pylinalg.qr.backends.cpu import CPUHouseholderBackend

__all__ = ["CPUHouseholderBackend"]
