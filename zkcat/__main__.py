from zkcat.cli import app

app()
