"""The Adventure of Floppy: dodge the tubes, keep the high score."""

__version__ = "0.1.0"
