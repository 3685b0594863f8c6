"""
Configuration Context

Responsibilities:
- Loads the user's config.toml from the typstgen config directory
- Resolves CLI flags, config values and built-in defaults into one options record
- Infers the author name from the host when none is configured

Owns: Option precedence, config schema, host lookups
Never: Reads or modifies template text
"""
