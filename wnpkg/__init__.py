"""Package a Node.js project into a folder with a native launcher executable."""

__version__ = "0.1.0"