from __future__ import annotations

from envload.environment import EnvironmentTable
from envload.loader import Loader


def load_dotenv(
    path: str = ".env",
    override_keys: bool = False,
    environment: EnvironmentTable | None = None,
) -> dict[str, str] | None:
    """Start-up helper: load ``path`` when it exists, otherwise return None."""
    return Loader(environment).load_if_exists(path, override_keys=override_keys)
