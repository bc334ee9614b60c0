from expo_directory.cli import app

app()
