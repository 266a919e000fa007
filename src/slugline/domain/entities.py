"""Per-entity slug rules.

Issues, plans and tasks use ``<name>-<id>``.  Stages are addressed by
position, so their slug carries a 1-based index.  Review policies already
have an opaque id and use it verbatim.  Worksheet slugs are
``<project-id>-<worksheet-uid>``, built from the worksheet's resource names.
"""

from __future__ import annotations

from pydantic import BaseModel

from slugline.domain.resources import NamePrefixes, resource_id
from slugline.domain.slugs import DEFAULT_CODEC, SlugCodec

_DEFAULT_PREFIXES = NamePrefixes()


class SQLReviewPolicy(BaseModel):
    """A SQL review policy, identified by an opaque policy id."""

    model_config = {"frozen": True}

    id: str
    title: str = ""


class Worksheet(BaseModel):
    """A SQL worksheet.

    Attributes:
        name: Resource name, e.g. ``worksheets/101``.
        project: Owning project's resource name, e.g. ``projects/shop-db``.
    """

    model_config = {"frozen": True}

    name: str
    project: str
    title: str = ""


def issue_slug(issue_name: str, issue_id: int | str, *, codec: SlugCodec = DEFAULT_CODEC) -> str:
    return codec.encode(issue_name, issue_id)


def plan_slug(plan_name: str, plan_id: int | str, *, codec: SlugCodec = DEFAULT_CODEC) -> str:
    return codec.encode(plan_name, plan_id)


def task_slug(name: str, task_id: int | str, *, codec: SlugCodec = DEFAULT_CODEC) -> str:
    return codec.encode(name, task_id)


def stage_slug(stage_name: str, stage_index: int, *, codec: SlugCodec = DEFAULT_CODEC) -> str:
    """Slug for the stage at 0-based *stage_index* (rendered 1-based)."""
    return codec.encode_index(stage_name, stage_index)


def sql_review_policy_slug(policy: SQLReviewPolicy, *, codec: SlugCodec = DEFAULT_CODEC) -> str:
    return codec.encode_verbatim(policy.id)


def worksheet_slug(
    sheet: Worksheet,
    *,
    prefixes: NamePrefixes = _DEFAULT_PREFIXES,
    codec: SlugCodec = DEFAULT_CODEC,
) -> str:
    """Slug ``<project-id>-<worksheet-uid>`` for *sheet*.

    The project id is already URL-safe and is joined without normalization.
    """
    uid = resource_id(sheet.name, prefixes.worksheet_prefix)
    project_id = resource_id(sheet.project, prefixes.project_prefix)
    return codec.join(project_id, uid)


def project_name_from_sheet_slug(
    slug: str,
    *,
    prefixes: NamePrefixes = _DEFAULT_PREFIXES,
    codec: SlugCodec = DEFAULT_CODEC,
) -> str:
    """Recover the owning project's resource name from a worksheet slug."""
    return f"{prefixes.project_prefix}{codec.decode_residual_name(slug)}"


def worksheet_name_from_slug(
    slug: str,
    *,
    prefixes: NamePrefixes = _DEFAULT_PREFIXES,
    codec: SlugCodec = DEFAULT_CODEC,
) -> str:
    """Recover the worksheet resource name from a worksheet slug."""
    return f"{prefixes.worksheet_prefix}{codec.decode_trailing_identifier_string(slug)}"
