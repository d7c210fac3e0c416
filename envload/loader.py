from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Mapping, Union

from envload.environment import EnvironmentTable, ProcessEnvironment
from envload.parser.document import parse_document, read_stream

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
Source = Union[PathLike, IO, Mapping[str, str]]


class Loader:
    """
    Reads .env content and merges it into an environment table.

    Every load returns the mapping that was read, even when the override
    policy left some or all of the environment untouched.
    """

    def __init__(self, environment: EnvironmentTable | None = None) -> None:
        self._env = environment if environment is not None else ProcessEnvironment()

    @property
    def environment(self) -> EnvironmentTable:
        return self._env

    def load_string(self, text: str, override_keys: bool = False) -> dict[str, str]:
        return self.merge(parse_document(text), override_keys=override_keys)

    def load(self, source: Source, override_keys: bool = False) -> dict[str, str]:
        if isinstance(source, Mapping):
            return self.merge(source, override_keys=override_keys)
        if hasattr(source, "read"):
            return self.load_string(read_stream(source), override_keys=override_keys)
        return self.load_string(self._read_file(source), override_keys=override_keys)

    def load_if_exists(self, path: PathLike, override_keys: bool = False) -> dict[str, str] | None:
        try:
            text = self._read_file(path)
        except FileNotFoundError:
            logger.debug("env file not found | path=%s", path)
            return None
        return self.load_string(text, override_keys=override_keys)

    def merge(self, values: Mapping[str, str], override_keys: bool = False) -> dict[str, str]:
        applied = 0
        kept = 0
        # Keys are applied one at a time; a failure midway leaves earlier keys set.
        for key, value in values.items():
            if self._env.contains(key) and not override_keys:
                kept += 1
                continue
            self._env.set(key, value)
            applied += 1

        logger.debug(
            "env merged | keys=%d applied=%d kept=%d override=%s",
            len(values),
            applied,
            kept,
            override_keys,
        )
        return dict(values)

    @staticmethod
    def _read_file(path: PathLike) -> str:
        return Path(path).read_text(encoding="utf-8")


def load_string(
    text: str,
    override_keys: bool = False,
    environment: EnvironmentTable | None = None,
) -> dict[str, str]:
    return Loader(environment).load_string(text, override_keys=override_keys)


def load(
    source: Source,
    override_keys: bool = False,
    environment: EnvironmentTable | None = None,
) -> dict[str, str]:
    return Loader(environment).load(source, override_keys=override_keys)


def load_if_exists(
    path: PathLike,
    override_keys: bool = False,
    environment: EnvironmentTable | None = None,
) -> dict[str, str] | None:
    return Loader(environment).load_if_exists(path, override_keys=override_keys)
