"""Command line tools: recording summaries and playback."""
