"""
Default values for option resolution.

Used by config_resolver.py as the last tier of the CLI > config.toml > default chain.
"""

DEFAULT_OUTPUT = "output"
DEFAULT_LANG = "en"

AUTHOR_PLACEHOLDER = "Author Name"
DEFAULT_ORCID = "0000-0000-0000-0000"
DEFAULT_EMAIL = "author@example.com"
DEFAULT_LIB_FILE = "lib.typ"

# Author-name inference toggles (config keys: name_inference, inferred_name_reformat)
NAME_INFERENCE_DEFAULT = True
INFERRED_NAME_REFORMAT_DEFAULT = True

APP_NAME = "typstgen"
CONFIG_FILE_NAME = "config.toml"
