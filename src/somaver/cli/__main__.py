from somaver.cli.main import app

app()
