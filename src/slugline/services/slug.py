"""SlugService — encode and decode composite slugs for the CLI.

The domain codec never fails loudly: it returns ``-1`` or ``nan``.  This
service turns those out-of-band values into ServiceResults so the CLI can
report them, while leaving the codec contract untouched.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from slugline.domain import entities
from slugline.domain.normalize import make_normalizer
from slugline.domain.slugs import INVALID_ID, SlugCodec, parse_int_prefix
from slugline.services.result import ServiceResult, failure

if TYPE_CHECKING:
    from slugline.config.settings import SluglineSettings

logger = logging.getLogger(__name__)

ENCODE_KINDS = ("issue", "plan", "task", "stage", "policy", "worksheet")
DECODE_KINDS = ("id", "uid", "string", "index", "residual", "project", "worksheet")

INVALID_SLUG = "INVALID_SLUG"
INVALID_INDEX = "INVALID_INDEX"
UNKNOWN_KIND = "UNKNOWN_KIND"

_DIGITS = re.compile(r"[0-9]+")


class SlugService:
    """Composite slug operations configured from :class:`SluglineSettings`."""

    def __init__(self, settings: SluglineSettings) -> None:
        self._prefixes = settings.names.to_prefixes()
        self._codec = SlugCodec(
            normalize=make_normalizer(
                max_length=settings.normalize.max_length,
                lowercase=settings.normalize.lowercase,
            )
        )

    @property
    def codec(self) -> SlugCodec:
        return self._codec

    # --- Encoding ---

    def encode(self, kind: str, name: str, identifier: str) -> ServiceResult:
        """Build the slug for an entity of *kind*.

        For ``stage`` the identifier is the 0-based stage index.  For
        ``policy`` the name is ignored.  For ``worksheet`` *name* is the
        project resource name and *identifier* the worksheet resource name.
        """
        op = f"encode_{kind}"
        if kind not in ENCODE_KINDS:
            return failure(op, UNKNOWN_KIND, f"Unknown entity kind: {kind}", kind=kind)

        warnings: list[str] = []
        codec = self._codec
        if kind == "stage":
            index = parse_int_prefix(identifier) if _DIGITS.fullmatch(identifier) else None
            try:
                if index is None:
                    raise ValueError(identifier)
                slug = entities.stage_slug(name, index, codec=codec)
            except ValueError:
                # Also hit when index + 1 is too long to render as a string.
                return failure(
                    op,
                    INVALID_INDEX,
                    f"Stage index must be a non-negative integer, got {identifier[:40]!r}",
                    identifier=identifier,
                )
        elif kind == "policy":
            slug = entities.sql_review_policy_slug(
                entities.SQLReviewPolicy(id=identifier, title=name), codec=codec
            )
        elif kind == "worksheet":
            sheet = entities.Worksheet(name=identifier, project=name)
            slug = entities.worksheet_slug(sheet, prefixes=self._prefixes, codec=codec)
        else:
            encoder = _NAMED_ENCODERS[kind]
            slug = encoder(name, identifier, codec=codec)

        if kind in _NAMED_ENCODERS or kind == "stage":
            if not codec.normalize(name):
                warnings.append(f"Name {name!r} normalizes to an empty token")

        logger.debug("Encoded %s slug %r", kind, slug)
        return ServiceResult(
            ok=True,
            op=op,
            data={"slug": slug, "kind": kind, "name": name, "identifier": identifier},
            warnings=warnings,
        )

    # --- Decoding ---

    def decode(self, kind: str, slug: str) -> ServiceResult:
        """Recover the part of *slug* selected by *kind*.

        ``id`` is the untrusted-input decoder: a non-numeric or negative
        trailing segment is reported as an ``INVALID_SLUG`` failure.
        ``uid`` and ``index`` are the trusted decoders: a non-numeric
        segment yields ``value: null`` with a warning.
        """
        op = f"decode_{kind}"
        if kind not in DECODE_KINDS:
            return failure(op, UNKNOWN_KIND, f"Unknown decode kind: {kind}", kind=kind)

        codec = self._codec
        warnings: list[str] = []
        value: int | str | None
        if kind == "id":
            number = codec.decode_trailing_integer(slug)
            if number == INVALID_ID:
                logger.debug("Rejected slug %r: no usable trailing id", slug)
                return failure(
                    op,
                    INVALID_SLUG,
                    f"No non-negative integer id at the end of {slug!r}",
                    slug=slug,
                )
            value = number
        elif kind in ("uid", "index"):
            decoder = codec.decode_trailing_uid if kind == "uid" else codec.decode_trailing_index
            value = _nan_to_none(decoder(slug))
            if value is None:
                warnings.append(f"Trailing segment of {slug!r} is not a number")
        elif kind == "string":
            value = codec.decode_trailing_identifier_string(slug)
        elif kind == "residual":
            value = codec.decode_residual_name(slug)
        elif kind == "project":
            value = entities.project_name_from_sheet_slug(
                slug, prefixes=self._prefixes, codec=codec
            )
        else:
            value = entities.worksheet_name_from_slug(slug, prefixes=self._prefixes, codec=codec)

        logger.debug("Decoded %s from %r -> %r", kind, slug, value)
        return ServiceResult(
            ok=True,
            op=op,
            data={"slug": slug, "kind": kind, "value": value},
            warnings=warnings,
        )


_NAMED_ENCODERS: dict[str, Callable[..., str]] = {
    "issue": entities.issue_slug,
    "plan": entities.plan_slug,
    "task": entities.task_slug,
}


def _nan_to_none(value: int | float) -> int | None:
    if isinstance(value, float) and math.isnan(value):
        return None
    return int(value)
