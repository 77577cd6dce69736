from headerfield.main import cli

cli()
