"""
Device selection for tensor-valued point data.
"""

from typing import Optional, Union
import torch
import warnings


def get_default_device() -> torch.device:
    """Get the default device based on availability.

    Returns:
        Default device (cuda if available, else mps, else cpu)
    """
    if torch.cuda.is_available():
        return torch.device('cuda')
    elif hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return torch.device('mps')
    else:
        return torch.device('cpu')


def parse_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """Parse device specification.

    Args:
        device: Device specification
            - None: CPU
            - 'auto': Use best available
            - 'cpu': Use CPU
            - 'cuda': Use default CUDA device
            - 'cuda:X': Use CUDA device X
            - 'mps': Use Apple Metal Performance Shaders
            - torch.device: Use as-is

    Returns:
        Parsed device
    """
    # The engine walks objects one by one, so small per-object tensors stay
    # on the CPU unless a device is asked for explicitly.
    if device is None:
        return torch.device('cpu')

    if isinstance(device, torch.device):
        return device

    if isinstance(device, str):
        if device == 'auto':
            return get_default_device()
        elif device == 'cpu':
            return torch.device('cpu')
        elif device.startswith('cuda'):
            if not torch.cuda.is_available():
                warnings.warn("CUDA not available, falling back to CPU")
                return torch.device('cpu')
            return torch.device(device)
        elif device == 'mps':
            if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
                return torch.device('mps')
            else:
                warnings.warn("MPS not available, falling back to CPU")
                return torch.device('cpu')
        else:
            raise ValueError(f"Unknown device: {device}")
    else:
        raise TypeError(f"Device must be str or torch.device, got {type(device)}")
