"""Endpoint-anchored piecewise-linear time warping of a series."""

import numpy as np

from .errors import InvalidLength
from .series import TrajectorySeries


def resample_channel(samples: np.ndarray, new_length: int) -> np.ndarray:
    """
    Resample one (M, 3) channel to new_length samples.
    
    Output index i < new_length - 1 reads the source at the fractional
    position i * (M - 1) / (new_length - 1) and blends the two neighbouring
    samples linearly on each axis. The final output sample is the final
    source sample, copied exactly.
    """
    source_length = samples.shape[0]
    out = np.empty((new_length, 3), dtype=np.float64)
    out[-1] = samples[-1]
    
    if new_length == 1:
        return out
    
    stride = (source_length - 1) / (new_length - 1)
    steps = np.arange(new_length - 1, dtype=np.float64) * stride
    base = np.floor(steps).astype(np.int64)
    frac = (steps - base)[:, None]
    # A single-sample source has no upper neighbour
    upper = np.minimum(base + 1, source_length - 1)
    
    lo = samples[base]
    hi = samples[upper]
    out[:-1] = lo + (hi - lo) * frac
    return out


def resample(source: TrajectorySeries, new_length: int) -> TrajectorySeries:
    """
    Build a new series of new_length samples from source.
    
    Args:
        source: Series to warp
        new_length: Target sample count (>= 1)
    
    Returns:
        A series with the same key, channels and original length as source.
        When the lengths already match the samples are copied unchanged.
    
    Raises:
        InvalidLength: new_length or the source length is below one
    """
    if new_length < 1:
        raise InvalidLength(f"{source.key}: cannot resample to {new_length} samples")
    if len(source) < 1:
        raise InvalidLength(f"{source.key}: cannot resample an empty series")
    
    if len(source) == new_length:
        channels = {name: samples.copy() for name, samples in source.items()}
    else:
        channels = {name: resample_channel(samples, new_length)
                    for name, samples in source.items()}
    
    return TrajectorySeries(source.key, channels, original_length=source.original_length)
