from fbws.cli import cli

cli()
