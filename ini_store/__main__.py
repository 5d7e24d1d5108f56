from ini_store.cli import app

app(prog_name="ini-store")
