from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AdapterConfig:
    success_codes: range = range(200, 300)
    log_bodies: bool = False


DEFAULT_CONFIG = AdapterConfig()
