from .config_loader import load_configs, load_descriptor_settings
from .errors import (
    DescriptorError,
    KernelWidthError,
    KernelTooLargeError,
    DegenerateInputError,
    UnsupportedPolicy,
)
from .io_utils import ensure_dir, load_grayscale, save_descriptor_result
from .parallel import map_row_bands
__all__ = [
    "load_configs",
    "load_descriptor_settings",
    "DescriptorError",
    "KernelWidthError",
    "KernelTooLargeError",
    "DegenerateInputError",
    "UnsupportedPolicy",
    "ensure_dir",
    "load_grayscale",
    "save_descriptor_result",
    "map_row_bands",
]
