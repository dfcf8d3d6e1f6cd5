from contextlib import contextmanager

import click

from crypto_multihash import config
from crypto_multihash.algorithms import lookup_by_name, supported_algorithms
from crypto_multihash.bases import Base, infer_base
from crypto_multihash.check import check_multihash_stream
from crypto_multihash.digest import iter_chunks, multihash_stream_many
from crypto_multihash.envelope import MultihashDigest
from crypto_multihash.errors import MultihashError

ALGORITHM_NAMES = [alg.name for alg in supported_algorithms()]
BASE_LABELS = {"base16": "Base16", "base58": "Base58", "base64": "Base64"}


@contextmanager
def _open_input(path):
    """Open a file for binary reading; "-" is standard input."""
    if path == "-":
        yield click.get_binary_stream("stdin")
    else:
        with open(path, "rb") as f:
            yield f


@click.command("hash")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--algorithm",
    "-a",
    "algorithms",
    multiple=True,
    type=click.Choice(ALGORITHM_NAMES),
    help="Algorithm to use (repeatable). Defaults to all supported algorithms.",
)
@click.option(
    "--length",
    "-l",
    type=int,
    default=None,
    help="Truncate every digest to this many bytes.",
)
@click.pass_context
def hash_files(ctx, files, algorithms, length):
    """Prints the multihash of each FILE ("-" or none for standard input)."""
    selected = [lookup_by_name(name) for name in algorithms] or list(
        supported_algorithms()
    )
    failed = False

    for path in files or ("-",):
        try:
            with _open_input(path) as f:
                digests = multihash_stream_many(selected, iter_chunks(f))
        except OSError as e:
            click.echo(f"Error: cannot read {path}: {e}", err=True)
            failed = True
            continue

        click.echo(f"Hashing {'<stdin>' if path == '-' else path}\n")
        for m in digests:
            try:
                if length is not None:
                    m = m.truncate(length)
                lines = [
                    f"{BASE_LABELS[name]}: {m.encode(Base(name))}"
                    for name in config.CLI_BASES
                ]
            except MultihashError as e:
                click.echo(f"Error: {path}: {m.algorithm.name}: {e}", err=True)
                failed = True
                continue

            click.echo(m.algorithm.name)
            for line in lines:
                click.echo(line)
            click.echo("")

    click.echo("Done! Note: shake-128/256 and Base32 are not yet part of the library")
    if failed:
        ctx.exit(1)


@click.command("check")
@click.argument("multihash")
@click.argument(
    "file", default="-", type=click.Path(dir_okay=False, allow_dash=True)
)
@click.pass_context
def check(ctx, multihash, file):
    """Verifies that MULTIHASH is the digest of FILE (default: standard input)."""
    try:
        with _open_input(file) as f:
            matched = check_multihash_stream(multihash, iter_chunks(f))
    except MultihashError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Cannot read {file}: {e}")

    if matched:
        click.echo("OK")
    else:
        click.echo("MISMATCH")
        ctx.exit(1)


@click.command("inspect")
@click.argument("multihash")
def inspect(multihash):
    """Decodes MULTIHASH and shows its header."""
    try:
        base = infer_base(multihash)
        m = MultihashDigest.decode(multihash, base)
    except MultihashError as e:
        raise click.ClickException(str(e))

    click.echo(f"Base:      {base}")
    click.echo(f"Algorithm: {m.algorithm.name}")
    click.echo(f"Code:      0x{m.algorithm.code:02x}")
    click.echo(f"Length:    {m.length}/{m.algorithm.digest_length}")
    click.echo(f"Digest:    {m.truncated_digest.hex()}")
