"""vts-cli - command-line client for the VTube Studio plugin API."""

__version__ = "0.4.0"
