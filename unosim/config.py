"""Runtime configuration read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from unosim.engine import DEFAULT_SEED, DrawPolicy

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class GameConfig:
    """Settings for running games.

    Every field can be set from an ``UNO_*`` environment variable; CLI flags
    override whatever is loaded here.
    """

    num_players: int = 4
    seed: int = DEFAULT_SEED
    draw_policy: DrawPolicy = DrawPolicy.RETRY
    reverse_skips_with_two_players: bool = False
    max_turns: int = 1000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from ``env`` (defaults to ``os.environ`` after loading ``.env``)."""
        if env is None:
            load_dotenv()
            env = os.environ

        policy_raw = env.get("UNO_DRAW_POLICY", DrawPolicy.RETRY.value).strip().lower()
        try:
            policy = DrawPolicy(policy_raw)
        except ValueError:
            choices = ", ".join(p.value for p in DrawPolicy)
            raise ValueError(f"UNO_DRAW_POLICY must be one of {choices}, got {policy_raw!r}") from None

        config = cls(
            num_players=_int(env, "UNO_PLAYERS", cls.num_players),
            seed=_int(env, "UNO_SEED", cls.seed),
            draw_policy=policy,
            reverse_skips_with_two_players=_bool(env, "UNO_REVERSE_SKIPS", cls.reverse_skips_with_two_players),
            max_turns=_int(env, "UNO_MAX_TURNS", cls.max_turns),
            log_level=env.get("UNO_LOG_LEVEL", cls.log_level).upper(),
        )
        if config.num_players < 1:
            raise ValueError(f"UNO_PLAYERS must be at least 1, got {config.num_players}")
        if config.max_turns < 1:
            raise ValueError(f"UNO_MAX_TURNS must be at least 1, got {config.max_turns}")
        return config
