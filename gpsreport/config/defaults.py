"""Default configuration values for gpsreport."""

# Default configuration dictionary
DEFAULT_CONFIG = {
    # Input scanning
    "scan": {
        "root": "images",
    },
    
    # Report outputs (the HTML path is derived from the CSV path)
    "output": {
        "csv": "output.csv",
    },
    
    # Console logging (stderr)
    "logging": {
        "level": "INFO",
    },
}

# Required configuration fields (must be non-empty after overrides)
REQUIRED_FIELDS = [
    "scan.root",
    "output.csv",
]

# Configuration field descriptions used in validation errors
FIELD_DESCRIPTIONS = {
    "scan.root": "Directory scanned for images",
    "output.csv": "CSV report path (-csv)",
}
