"""Load and validate the YAML seed of initial records."""

from pathlib import Path

import yaml


def get_default_seed_path() -> Path:
    """Return the seed shipped with the package."""
    return Path(__file__).resolve().parent / "seed.yaml"


def load_seed(path: Path | None = None) -> list[dict]:
    """Load seed YAML and return its field-sets. Validates minimal structure."""
    if path is None:
        path = get_default_seed_path()
    raw = Path(path).read_text(encoding="utf-8")
    seed = yaml.safe_load(raw)
    if seed is None:
        return []
    if not isinstance(seed, list):
        raise ValueError("Seed YAML must be a list of records")
    for position, entry in enumerate(seed):
        if not isinstance(entry, dict):
            raise ValueError(f"Seed entry {position} must be a mapping")
    return seed
