# config.py
import os

# Paths used when the command line gives none.
DEFAULT_INPUT = os.environ.get("JSON_CSV_DEFAULT_INPUT", "sample.json")
DEFAULT_OUTPUT = os.environ.get("JSON_CSV_DEFAULT_OUTPUT", os.path.join("exports", "output.csv"))
DEFAULT_DELIMITER = ","

# Directory the web front-end suggests for converted files.
EXPORT_DIR = os.environ.get("JSON_CSV_EXPORT_DIR", "exports")

# Number of flattened rows shown in previews.
PREVIEW_LIMIT = 3

LOG_LEVEL = os.environ.get("JSON_CSV_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
