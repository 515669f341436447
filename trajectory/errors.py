"""Exceptions raised while loading and synchronizing recordings."""


class ReplayError(ValueError):
    """Base class for malformed recordings and stream sets."""


class InvalidLength(ReplayError):
    """A series length (source or target) is smaller than one sample."""


class ChannelLengthMismatch(ReplayError):
    """The channels of one series do not share the same sample count."""


class EmptyStreamSet(ReplayError):
    """A synchronization set was built from zero streams."""


class DuplicateStreamKey(ReplayError):
    """Two streams in one synchronization set share the same key."""


class RecordingFormatError(ReplayError):
    """A recording file could not be decoded into marker samples."""


class GridMismatch(ReplayError):
    """Two density grids with different dimensions were combined."""
