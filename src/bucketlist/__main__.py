from bucketlist.cli import cli

cli()
