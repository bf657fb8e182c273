from fmtref.cli.app import app

app(prog_name="fmtref")
