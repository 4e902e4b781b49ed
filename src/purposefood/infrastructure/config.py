"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from purposefood.domain.model.delivery import IMMEDIATE_DELIVERY_WINDOW

DATA_DIR_ENV = "PURPOSE_FOOD_DATA_DIR"
IMMEDIATE_WINDOW_ENV = "PURPOSE_FOOD_IMMEDIATE_ESTIMATE"

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    immediate_window: str = IMMEDIATE_DELIVERY_WINDOW

    @staticmethod
    def from_env(
        environ: Mapping[str, str] | None = None,
        data_dir: Path | None = None,
    ) -> Settings:
        """Build settings from *environ*; an explicit *data_dir* wins."""
        env = os.environ if environ is None else environ
        return Settings(
            data_dir=data_dir or Path(env.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR),
            immediate_window=env.get(IMMEDIATE_WINDOW_ENV) or IMMEDIATE_DELIVERY_WINDOW,
        )


def configure_logging(verbosity: int = 0) -> None:
    """WARNING by default, INFO with one ``-v``, DEBUG with two or more."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
