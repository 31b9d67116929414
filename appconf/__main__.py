from appconf.cli.runner import run_cli

run_cli()
