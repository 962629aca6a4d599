"""Error taxonomy for descriptor computation.

Precondition checks return an error instance (or ``None``) instead of raising,
so callers can validate every input before any parallel work starts and raise
the first failure themselves.
"""
from __future__ import annotations
from typing import Iterable, Optional, Tuple

KERNEL_WIDTH_MSG = "Kernel width is not odd!"
KERNEL_SIZE_MSG = "Kernel radius is larger than input array!"
ZERO_STD_MSG = "Standard deviation of the image is 0! Cannot divide!"


class DescriptorError(ValueError):
    pass

class KernelWidthError(DescriptorError):
    def __init__(self, message: str = KERNEL_WIDTH_MSG):
        super().__init__(message)

class KernelTooLargeError(DescriptorError):
    def __init__(self, message: str = KERNEL_SIZE_MSG):
        super().__init__(message)

class DegenerateInputError(DescriptorError):
    def __init__(self, message: str = ZERO_STD_MSG):
        super().__init__(message)

class UnsupportedPolicy(DescriptorError):
    def __init__(self, policy: str):
        self.policy = policy
        super().__init__(f"Unsupported padding policy: '{policy}'")


def check_kernel(width: int, shape: Tuple[int, ...]) -> Optional[DescriptorError]:
    """Validate a square kernel of ``width`` against an array ``shape``."""
    if width % 2 == 0:
        return KernelWidthError()
    distance = (width - 1) // 2
    if any(distance > n for n in shape):
        return KernelTooLargeError()
    return None


def first_error(checks: Iterable[Optional[DescriptorError]]) -> Optional[DescriptorError]:
    for err in checks:
        if err is not None:
            return err
    return None


def raise_for(err: Optional[DescriptorError]) -> None:
    if err is not None:
        raise err

__all__ = [
    'DescriptorError', 'KernelWidthError', 'KernelTooLargeError', 'DegenerateInputError',
    'UnsupportedPolicy', 'check_kernel', 'first_error', 'raise_for',
    'KERNEL_WIDTH_MSG', 'KERNEL_SIZE_MSG', 'ZERO_STD_MSG',
]
