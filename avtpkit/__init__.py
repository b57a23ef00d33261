"""Build and parse IEEE 1722 AVTP packet headers, with helpers for H.264 over CVF."""

__version__ = "0.1.0"

__all__ = [
    "aaf",
    "can",
    "common",
    "control",
    "crf",
    "cvf",
    "fields",
    "listener",
    "rvf",
    "sensor",
    "talker",
]