"""Command group: build composite slugs for entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from slugline.commands._base import SlugGroup

if TYPE_CHECKING:
    from slugline.commands._context import AppContext


_ENCODE_EXAMPLES = """\
  slugline encode issue "Add index on users.email" 42
  slugline encode plan "Q3 schema rollout" 1007
  slugline encode stage "Prod (EU)" 0
  slugline encode policy prod-policy --title "Strict review"
  slugline encode worksheet projects/shop-db worksheets/101
  slugline -q encode task "Backfill orders" 9"""


@click.group(cls=SlugGroup, examples=_ENCODE_EXAMPLES)
def encode() -> None:
    """Encode an entity name and identifier as a composite slug."""


@encode.command(examples='  slugline encode issue "Add index on users.email" 42')
@click.argument("name")
@click.argument("issue_id")
@click.pass_obj
def issue(app: AppContext, name: str, issue_id: str) -> None:
    """Slug for an issue: <name>-<id>."""
    app.emit(app.service.encode("issue", name, issue_id))


@encode.command(examples='  slugline encode plan "Q3 schema rollout" 1007')
@click.argument("name")
@click.argument("plan_id")
@click.pass_obj
def plan(app: AppContext, name: str, plan_id: str) -> None:
    """Slug for a plan: <name>-<id>."""
    app.emit(app.service.encode("plan", name, plan_id))


@encode.command(examples='  slugline encode task "Backfill orders" 9')
@click.argument("name")
@click.argument("task_id")
@click.pass_obj
def task(app: AppContext, name: str, task_id: str) -> None:
    """Slug for a task: <name>-<id>."""
    app.emit(app.service.encode("task", name, task_id))


@encode.command(examples='  slugline encode stage "Prod (EU)" 0    # -> prod-eu-1')
@click.argument("name")
@click.argument("index")
@click.pass_obj
def stage(app: AppContext, name: str, index: str) -> None:
    """Slug for the stage at 0-based INDEX, rendered 1-based."""
    app.emit(app.service.encode("stage", name, index))


@encode.command(examples="  slugline encode policy prod-policy")
@click.argument("policy_id")
@click.option("--title", default="", help="Policy title (not part of the slug).")
@click.pass_obj
def policy(app: AppContext, policy_id: str, title: str) -> None:
    """Slug for a SQL review policy: its id, verbatim."""
    app.emit(app.service.encode("policy", title, policy_id))


@encode.command(examples="  slugline encode worksheet projects/shop-db worksheets/101")
@click.argument("project")
@click.argument("worksheet")
@click.pass_obj
def worksheet(app: AppContext, project: str, worksheet: str) -> None:
    """Slug for a worksheet from its PROJECT and WORKSHEET resource names."""
    app.emit(app.service.encode("worksheet", project, worksheet))
