"""Constants for autoignore."""

# Output file written into the scanned directory
GITIGNORE_FILE = ".gitignore"

# Optional per-project configuration (inside the scanned directory)
CONFIG_FILE = ".autoignore.yaml"

# Header lines
GENERATED_MARKER = "# Generated by autoignore"
MERGE_MARKER = "# Added by autoignore"
CUSTOM_MARKER = "# Custom"

# Seconds to wait for `git ls-files`
GIT_TIMEOUT = 10.0

# Violations shown before collapsing into "...and N more"
MAX_VIOLATIONS_DISPLAY = 20

# Environment variable enabling debug logging
DEBUG_ENV_VAR = "AUTOIGNORE_DEBUG"

# Version
AUTOIGNORE_VERSION = "0.1.0"
