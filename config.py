"""
Veerji language constants and compiler settings.

Output name, line bound and server address can be overridden through
environment variables.
"""
import os

KEYWORD_PRINT = "ਲਿਖੋ"
SEPARATOR = "☬"
UNKNOWN_PLACEHOLDER = "???"

SOURCE_EXTENSION = ".veerji"
DEFAULT_OUTPUT = os.environ.get("VEERJI_OUTPUT", "out.s")

# 0 disables the bound
MAX_LINE_LENGTH = int(os.environ.get("VEERJI_MAX_LINE_LENGTH", "1024"))

SERVER_HOST = os.environ.get("VEERJI_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("VEERJI_PORT", "8000"))
