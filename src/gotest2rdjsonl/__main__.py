from .cli import app

app(prog_name="gotest2rdjsonl")
