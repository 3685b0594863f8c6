"""
Integration tests for the assembly pipeline.
Tests: resolved options → loaded template → substituted text → written .typ file.
"""

import pytest

from typstgen.contexts.configuration.config_resolver import (
    PersistedConfig,
    RawFlags,
    resolve_options,
)
from typstgen.contexts.templating.assembler import (
    assemble_template,
    generate_document,
    output_file_path,
)
from typstgen.contexts.templating.exceptions import (
    CouldNotReadTemplateFile,
    CouldNotWriteOutputFile,
)
from typstgen.contexts.templating.template_source import (
    BuiltinArticle,
    CustomSource,
    resolve_template_source,
)

ORCID = "0000-0002-1825-0097"


@pytest.mark.integration
@pytest.mark.parametrize(
    "name,expected", [("notes", "notes.typ"), ("notes.typ", "notes.typ"), ("a.b", "a.b.typ")]
)
def test_output_file_path(name, expected):
    assert str(output_file_path(name)) == expected


@pytest.mark.integration
def test_builtin_report_fully_substituted(make_options, config_dir):
    text = assemble_template(make_options(orcid=ORCID, lang="de"))

    assert "{{" not in text
    assert 'author: "John Doe"' in text
    assert 'lang: "de"' in text
    assert "#let orcid_icon = " in text
    assert f'#link("https://orcid.org/{ORCID}")' in text
    assert "john.doe@example.com" in text


@pytest.mark.integration
def test_builtin_article_uses_plain_orcid(make_options, config_dir):
    text = assemble_template(make_options(template=BuiltinArticle(), orcid=ORCID))

    assert f"John Doe | https://orcid.org/{ORCID}" in text
    assert "orcid_icon" not in text


@pytest.mark.integration
def test_report_imports_library(make_options, config_dir):
    lib_file = config_dir / "lib.typ"
    lib_file.write_text("#let todo(body) = text(red, body)\n")

    text = assemble_template(make_options())

    assert text.startswith(f'#import "{lib_file.resolve()}": *\n\n')


@pytest.mark.integration
def test_generate_writes_output(make_options, config_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = generate_document(make_options(output_name="notes"))

    written = tmp_path / "notes.typ"
    assert result.output_path.name == "notes.typ"
    assert written.exists()
    assert result.bytes_written == len(written.read_bytes())
    assert "John Doe" in written.read_text(encoding="utf-8")


@pytest.mark.integration
def test_unreadable_template_writes_nothing(make_options, config_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    options = make_options(template=CustomSource(tmp_path / "missing.typ"))

    with pytest.raises(CouldNotReadTemplateFile):
        generate_document(options)

    assert not (tmp_path / "output.typ").exists()


@pytest.mark.integration
def test_custom_template_from_config_pipeline(templates_dir, tmp_path, monkeypatch):
    """Config default_template + flags + defaults flow through to the written file."""
    monkeypatch.chdir(tmp_path)
    (templates_dir / "memo.typ").write_text(
        "{{AUTHOR_NAME}}{{ORCID_ID}}\n{{EMAIL}} {{LANG}}\n", encoding="utf-8"
    )
    config = PersistedConfig(
        default_output="memo",
        default_template="memo",
        email="jane@example.com",
        name_inference=False,
    )

    options = resolve_options(RawFlags(orcid=ORCID, lang="fr"), config)
    generate_document(options)

    assert (tmp_path / "memo.typ").read_text(encoding="utf-8") == (
        f"Author Name | https://orcid.org/{ORCID}\njane@example.com fr\n"
    )


@pytest.mark.integration
def test_custom_template_from_flag(templates_dir, make_options):
    (templates_dir / "letter.typ").write_text("Dear {{AUTHOR_NAME}},")

    source = resolve_template_source("letter")
    text = assemble_template(make_options(template=source))

    assert text == "Dear John Doe,"


@pytest.mark.integration
def test_unwritable_output(make_options, config_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    options = make_options(output_name="missing_dir/notes")

    with pytest.raises(CouldNotWriteOutputFile) as exc_info:
        generate_document(options)

    assert exc_info.value.output_path.name == "notes.typ"
    assert isinstance(exc_info.value.original_error, OSError)
