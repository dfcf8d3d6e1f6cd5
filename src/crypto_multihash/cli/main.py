import click

from crypto_multihash.cli.digest import hash_files, check, inspect


@click.group()
@click.version_option(package_name="crypto-multihash")
def cli():
    """Create, inspect and verify multihash digests."""
    pass


cli.add_command(hash_files)
cli.add_command(check)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()
