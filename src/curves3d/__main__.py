from curves3d.cli import app

app(prog_name="curves3d")
