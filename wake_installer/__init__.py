"""wake-installer: fetches, verifies and installs the Wake release binary."""

__version__ = "0.1.5"
