"""Section models for ``manners.toml``; defaults live here, the file only overrides."""

from __future__ import annotations

from pydantic import BaseModel


class CacheConfig(BaseModel):
    """``[cache]`` — the process-wide coach cache.

    ``enabled = false`` recompiles on every lookup, which helps when a
    predicate turns out not to be pure.
    """

    model_config = {"frozen": True}

    enabled: bool = True
