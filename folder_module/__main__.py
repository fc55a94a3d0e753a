from folder_module.cli import cli

cli()
