"""Runtime settings read from the environment.

somaver has no configuration file. The few knobs it has come from environment
variables and can be overridden per call / per CLI invocation:

- SOMAVER_ROOT       data root holding `<name>/<version>/` folders (default ".")
- SOMAVER_LOADER     data module loader reference `package.module:function`
- SOMAVER_LOG_LEVEL  log level name (default WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

ENV_ROOT = "SOMAVER_ROOT"
ENV_LOADER = "SOMAVER_LOADER"
ENV_LOG_LEVEL = "SOMAVER_LOG_LEVEL"

DEFAULT_LOADER = "somaver.core.module:load_text_module"


@dataclass(frozen=True)
class Settings:
    root: Path = Path(".")
    loader: str = DEFAULT_LOADER
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        root = env.get(ENV_ROOT, "").strip()
        loader = env.get(ENV_LOADER, "").strip()
        log_level = env.get(ENV_LOG_LEVEL, "").strip()
        return cls(
            root=Path(root) if root else cls.root,
            loader=loader or cls.loader,
            log_level=log_level.upper() if log_level else cls.log_level,
        )
