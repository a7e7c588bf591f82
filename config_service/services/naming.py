"""Environment name normalization.

Names are stored upper-cased, so every path that writes or looks up an
environment goes through ``normalize_environment_name``.
"""
JSON_SUFFIX = ".json"


def normalize_environment_name(name: str) -> str:
    """Canonical stored form of an environment name ("prod" -> "PROD")."""
    return name.strip().upper()


def strip_json_suffix(name: str) -> str:
    """Drop a trailing ``.json`` (any case) left over from the flattened-dump URL."""
    if name.lower().endswith(JSON_SUFFIX):
        return name[:-len(JSON_SUFFIX)]
    return name


def resolve_environment_name(raw: str) -> str:
    """Turn an ``env_name`` path segment into the stored name."""
    return normalize_environment_name(strip_json_suffix(raw))
