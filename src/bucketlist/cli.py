"""Click CLI entrypoint — `bucketlist <subcommand>`.

Every call is load -> one operation -> save. JSON output by default,
--human for plain text. A failure prints an error and exits 1 without saving.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable

import click

from bucketlist.config import Settings, load_settings
from bucketlist.defaults import ENV_DIR, ENV_HOME, ENV_LOG, resolve_store_dir
from bucketlist.errors import BucketListError
from bucketlist.items import Item
from bucketlist.output import output
from bucketlist import ops, store

log = logging.getLogger(__name__)


def _setup_logging(verbose: int) -> None:
    """Root logger to stderr. -v = INFO, -vv = DEBUG; else BUCKETLIST_LOG or WARNING."""
    if verbose:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = getattr(logging, os.getenv(ENV_LOG, "WARNING").upper(), logging.WARNING)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def _run(
    ctx: click.Context,
    action: Callable[[dict[str, Item], Settings], dict[str, Any]],
) -> None:
    """Load the store, apply one action, save, print the result."""
    human = ctx.obj["human"]
    try:
        env = dict(os.environ)
        # --home beats any BUCKETLIST_DIR from the environment
        if ctx.obj["home"] is not None:
            env.pop(ENV_DIR, None)
            env[ENV_HOME] = ctx.obj["home"]
        store_dir = resolve_store_dir(env)
        settings = load_settings(store_dir)
        items = store.load(store_dir, settings)
        result = action(items, settings)
        log.debug("items after %s: %s", ctx.info_name, items)
        store.save(store_dir, items)
    except BucketListError as exc:
        log.debug("%s failed", ctx.info_name, exc_info=True)
        output({"error": str(exc), "kind": type(exc).__name__}, human)
        return
    output(result, human)


@click.group()
@click.version_option(package_name="bucketlist")
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.option(
    "--home",
    default=None,
    help=f"Home directory holding .bucketlist/ (env: {ENV_HOME})",
)
@click.option("-v", "--verbose", count=True, help="More logging (-v info, -vv debug)")
@click.pass_context
def cli(ctx: click.Context, human: bool, home: str | None, verbose: int) -> None:
    """bucketlist — a bucket list that prioritizes items automatically.

    Touching an item raises its priority; priority decays every day the
    item is left alone, and neglected items drop out of `ls`.
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["human"] = human
    ctx.obj["home"] = home
    log.info("args: %s", sys.argv[1:])


@cli.command()
@click.argument("name")
@click.pass_context
def add(ctx: click.Context, name: str) -> None:
    """Add a new item or raise priority of an existing item."""
    _run(ctx, lambda items, settings: ops.add_or_increment(items, name, threshold=settings.active_threshold))


@cli.command()
@click.argument("name")
@click.pass_context
def incr(ctx: click.Context, name: str) -> None:
    """Same as `add`."""
    _run(ctx, lambda items, settings: ops.add_or_increment(items, name, threshold=settings.active_threshold))


@cli.command()
@click.argument("name")
@click.argument("note")
@click.pass_context
def note(ctx: click.Context, name: str, note: str) -> None:
    """Set the note of an existing item (replaces any previous note)."""
    _run(ctx, lambda items, _settings: ops.annotate(items, name, note))


@cli.command("del")
@click.argument("name")
@click.pass_context
def delete(ctx: click.Context, name: str) -> None:
    """Delete an item."""
    _run(ctx, lambda items, _settings: ops.delete(items, name))


@cli.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Show one item."""
    _run(ctx, lambda items, _settings: ops.get_item(items, name))


@cli.command()
@click.option("--all", "-a", "show_all", is_flag=True, help="Also show inactive items")
@click.pass_context
def ls(ctx: click.Context, show_all: bool) -> None:
    """List items, highest priority first."""

    def _list(items: dict[str, Item], settings: Settings) -> dict[str, Any]:
        listed = ops.list_items(items, show_inactive=show_all, threshold=settings.active_threshold)
        return {
            "items": [{"name": name, **item.to_dict()} for name, item in listed],
            "count": len(listed),
            "total": len(items),
        }

    _run(ctx, _list)


if __name__ == "__main__":
    cli()
