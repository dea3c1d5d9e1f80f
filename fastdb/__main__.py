from fastdb.cli import app

app(prog_name="fastdb")
