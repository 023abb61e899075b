"""House-rule settings for a hot-seat game."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from hotseat.core.applier import PROMOTION_CHOICES
from hotseat.core.enums import PieceType

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})

ENV_KING_CAPTURE_ENDS_GAME = "HOTSEAT_KING_CAPTURE_ENDS_GAME"
ENV_ENFORCE_KING_SAFETY = "HOTSEAT_ENFORCE_KING_SAFETY"
ENV_AUTO_PROMOTE = "HOTSEAT_AUTO_PROMOTE"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


def _parse_promotion(raw: str) -> PieceType | None:
    value = raw.strip().upper()
    if not value:
        return None
    try:
        ptype = PieceType[value]
    except KeyError:
        raise ValueError(f"Invalid piece type for {ENV_AUTO_PROMOTE}: {raw!r}") from None
    if ptype not in PROMOTION_CHOICES:
        raise ValueError(f"Cannot auto-promote to {ptype}")
    return ptype


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game settings.

    Args:
        king_capture_ends_game: Capturing a king wins immediately.
        enforce_king_safety: Reject moves that leave the mover's king attacked.
        auto_promote_to: Resolve promotions to this piece without asking.
    """

    king_capture_ends_game: bool = True
    enforce_king_safety: bool = False
    auto_promote_to: PieceType | None = None

    def __post_init__(self) -> None:
        if self.auto_promote_to is not None and self.auto_promote_to not in PROMOTION_CHOICES:
            raise ValueError(f"Cannot auto-promote to {self.auto_promote_to}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        """Build settings from ``HOTSEAT_*`` variables; unset ones keep defaults."""
        env = os.environ if environ is None else environ
        default = cls()

        king_capture = default.king_capture_ends_game
        if ENV_KING_CAPTURE_ENDS_GAME in env:
            king_capture = _parse_bool(
                ENV_KING_CAPTURE_ENDS_GAME, env[ENV_KING_CAPTURE_ENDS_GAME]
            )

        king_safety = default.enforce_king_safety
        if ENV_ENFORCE_KING_SAFETY in env:
            king_safety = _parse_bool(ENV_ENFORCE_KING_SAFETY, env[ENV_ENFORCE_KING_SAFETY])

        auto_promote = default.auto_promote_to
        if ENV_AUTO_PROMOTE in env:
            auto_promote = _parse_promotion(env[ENV_AUTO_PROMOTE])

        return cls(
            king_capture_ends_game=king_capture,
            enforce_king_safety=king_safety,
            auto_promote_to=auto_promote,
        )
