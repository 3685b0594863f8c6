"""
Default values for the templating context.

Provides the constants shared by:
- template_source.py (builtin names, templates directory, file extension)
- template_loader.py (builtin template files)
- substitution.py (placeholder tokens, ORCID icon asset)
"""

from pathlib import Path

# Extension of every template and generated document
TEMPLATE_EXTENSION = ".typ"

# Builtin template names accepted on the command line and in config.toml
BUILTIN_REPORT_NAME = "report"
BUILTIN_ARTICLE_NAME = "article"

# Subdirectory of the typstgen config directory holding custom templates
TEMPLATE_DIRECTORY = "templates"

BUILTIN_TEMPLATES_PATH = Path(__file__).parent / "builtin"
REPORT_TEMPLATE_FILE = BUILTIN_TEMPLATES_PATH / "report.typ"
ARTICLE_TEMPLATE_FILE = BUILTIN_TEMPLATES_PATH / "article.typ"

# Placeholder tokens recognized in template text
AUTHOR_TOKEN = "{{AUTHOR_NAME}}"
ORCID_TOKEN = "{{ORCID_ID}}"
ORCID_ICON_TOKEN = "{{ORCID_ICON_DECLARATION}}"
LANG_TOKEN = "{{LANG}}"
EMAIL_TOKEN = "{{EMAIL}}"

ORCID_URL_PREFIX = "https://orcid.org/"

# Name of the Typst variable bound by the ORCID icon declaration
ORCID_ICON_VARIABLE = "orcid_icon"
ORCID_ICON_SIZE_PT = 10

ORCID_ICON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 256">'
    '<path fill="#A6CE39" d="M256,128c0,70.7-57.3,128-128,128C57.3,256,0,198.7,0,128'
    'C0,57.3,57.3,0,128,0C198.7,0,256,57.3,256,128z"/>'
    '<g fill="#FFFFFF">'
    '<path d="M86.3,186.2H70.9V79.1h15.4v48.4V186.2z"/>'
    '<path d="M108.9,79.1h41.6c39.6,0,57,28.3,57,53.6c0,27.5-21.5,53.6-56.8,53.6h-41.8V79.1z '
    "M124.3,172.4h24.5c34.9,0,42.9-26.5,42.9-39.7c0-21.5-13.7-39.7-43.7-39.7h-23.7V172.4z\"/>"
    '<path d="M88.7,56.8c0,5.5-4.5,10.1-10.1,10.1c-5.6,0-10.1-4.6-10.1-10.1'
    'c0-5.6,4.5-10.1,10.1-10.1C84.2,46.7,88.7,51.3,88.7,56.8z"/>'
    "</g></svg>"
)
