"""
typstgen - Typst document generator

Generates a Typst source file from a builtin or user-supplied template, filling in
author, ORCID, language and email placeholders.

Architecture:
- Configuration Context: CLI flag / config file / default precedence
- Templating Context: Template source resolution, loading and placeholder substitution
"""

__version__ = "0.1.0"
