"""Command group: recover identifiers and names from composite slugs.

Slugs that begin with ``-`` must follow ``--`` so Click does not read
them as options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from slugline.commands._base import SlugGroup

if TYPE_CHECKING:
    from slugline.commands._context import AppContext


_DECODE_EXAMPLES = """\
  slugline decode id add-index-on-users-email-42
  slugline decode index prod-eu-1
  slugline decode string policy-abc123
  slugline decode residual my-report-7
  slugline decode project shop-db-101
  slugline decode worksheet shop-db-101
  slugline --json decode id not-a-slug"""


@click.group(cls=SlugGroup, examples=_DECODE_EXAMPLES)
def decode() -> None:
    """Decode part of a composite slug."""


@decode.command("id", examples="  slugline decode id my-report-name-7")
@click.argument("slug")
@click.pass_obj
def id_(app: AppContext, slug: str) -> None:
    """Trailing non-negative integer id (untrusted input; exits 1 if absent)."""
    app.emit(app.service.decode("id", slug))


@decode.command(examples="  slugline decode uid my-task-12")
@click.argument("slug")
@click.pass_obj
def uid(app: AppContext, slug: str) -> None:
    """Trailing integer uid (trusted input; null if not a number)."""
    app.emit(app.service.decode("uid", slug))


@decode.command("string", examples="  slugline decode string policy-abc123")
@click.argument("slug")
@click.pass_obj
def string_(app: AppContext, slug: str) -> None:
    """Trailing segment verbatim."""
    app.emit(app.service.decode("string", slug))


@decode.command(examples="  slugline decode index prod-eu-1    # -> 0")
@click.argument("slug")
@click.pass_obj
def index(app: AppContext, slug: str) -> None:
    """0-based index from a 1-based stage slug (null if not a number)."""
    app.emit(app.service.decode("index", slug))


@decode.command(examples="  slugline decode residual my-report-7    # -> my-report")
@click.argument("slug")
@click.pass_obj
def residual(app: AppContext, slug: str) -> None:
    """Everything except the trailing identifier segment."""
    app.emit(app.service.decode("residual", slug))


@decode.command(examples="  slugline decode project shop-db-101    # -> projects/shop-db")
@click.argument("slug")
@click.pass_obj
def project(app: AppContext, slug: str) -> None:
    """Project resource name from a worksheet slug."""
    app.emit(app.service.decode("project", slug))


@decode.command(examples="  slugline decode worksheet shop-db-101    # -> worksheets/101")
@click.argument("slug")
@click.pass_obj
def worksheet(app: AppContext, slug: str) -> None:
    """Worksheet resource name from a worksheet slug."""
    app.emit(app.service.decode("worksheet", slug))
