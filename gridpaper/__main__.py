from gridpaper.cli import app

app(prog_name="gridpaper")
