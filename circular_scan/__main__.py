from circular_scan.cli import cli

cli()
