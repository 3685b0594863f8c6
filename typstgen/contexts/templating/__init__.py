"""
Templating Context

Responsibilities:
- Resolves template names to builtin or custom template sources
- Loads template text (packaged builtins, user templates under <config_dir>/templates)
- Substitutes placeholder tokens ({{AUTHOR_NAME}}, {{ORCID_ID}}, ...) with resolved options
- Writes the assembled document

Owns: Template sources, placeholder vocabulary, ORCID rendering, output writing
Never: Decides option precedence
"""
