"""mdlive - serve a markdown file with live browser reload."""

__version__ = "0.1.0"
