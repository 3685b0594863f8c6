"""Unit tests for template loading."""

import pytest

from typstgen.contexts.templating.exceptions import CouldNotReadTemplateFile
from typstgen.contexts.templating.template_loader import (
    ArticleTemplate,
    CustomTemplate,
    ReportTemplate,
    load_template,
)
from typstgen.contexts.templating.template_source import (
    BuiltinArticle,
    BuiltinReport,
    CustomSource,
)


@pytest.mark.unit
def test_load_builtin_report():
    template = load_template(BuiltinReport())

    assert isinstance(template, ReportTemplate)
    assert "{{AUTHOR_NAME}}" in template.text
    assert "{{ORCID_ICON_DECLARATION}}" in template.text
    assert "{{LANG}}" in template.text


@pytest.mark.unit
def test_load_builtin_article():
    template = load_template(BuiltinArticle())

    assert isinstance(template, ArticleTemplate)
    assert "{{AUTHOR_NAME}}" in template.text
    # Article renders the ORCID as a plain link
    assert "{{ORCID_ICON_DECLARATION}}" not in template.text


@pytest.mark.unit
def test_load_custom_template(tmp_path):
    path = tmp_path / "custom.typ"
    path.write_text("= {{AUTHOR_NAME}}\n", encoding="utf-8")

    template = load_template(CustomSource(path))

    assert isinstance(template, CustomTemplate)
    assert template.text == "= {{AUTHOR_NAME}}\n"


@pytest.mark.unit
def test_missing_custom_template(tmp_path):
    path = tmp_path / "gone.typ"

    with pytest.raises(CouldNotReadTemplateFile) as exc_info:
        load_template(CustomSource(path))

    assert exc_info.value.template_path == path
    assert str(path) in str(exc_info.value)


@pytest.mark.unit
def test_directory_is_not_readable(tmp_path):
    directory = tmp_path / "folder.typ"
    directory.mkdir()

    with pytest.raises(CouldNotReadTemplateFile):
        load_template(CustomSource(directory))


@pytest.mark.unit
def test_undecodable_template(tmp_path):
    path = tmp_path / "binary.typ"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(CouldNotReadTemplateFile) as exc_info:
        load_template(CustomSource(path))

    assert isinstance(exc_info.value.original_error, UnicodeDecodeError)
