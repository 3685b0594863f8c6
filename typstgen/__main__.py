from typstgen.cli import app

app(prog_name="typstgen")
