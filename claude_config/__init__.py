"""Local SQLite store for Claude API accounts, directories and WebDAV sync settings."""

__version__ = "0.1.0"
