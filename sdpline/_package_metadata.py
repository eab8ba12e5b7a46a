from __future__ import annotations

import importlib.metadata as importlib_metadata
import warnings
from email.message import Message
from pathlib import Path
from typing import Any, Mapping, Sequence

import toml


metadata: Message | Mapping[str, Any] | None = None
try:
    metadata = importlib_metadata.metadata(__package__ or __name__)
except importlib_metadata.PackageNotFoundError:
    # running from a source checkout, read the project table instead
    package_path = Path(__file__).resolve().parent
    for pyproject_path in (package_path.parent / "pyproject.toml", package_path / "pyproject.toml"):
        if pyproject_path.exists():
            metadata = toml.load(pyproject_path)
            break
    else:
        warnings.warn(
            "Didn't find distinfo nor pyproject.toml for package metadata", stacklevel=1
        )


def get_metadata(distinfo_key: str, toml_path: Sequence[str | int]) -> Any:
    """
    Get a package metadata value, either from the installed distribution info,
    or from the ``pyproject.toml`` of a source checkout.

    :param distinfo_key: the key of the value in the distribution metadata.
    :param toml_path: the path of keys / indices of the value in ``pyproject.toml``.
    :return: the metadata value, or None if not available.
    """
    if metadata is None:
        return None
    if isinstance(metadata, Message):
        return metadata.get(distinfo_key)
    value: Any = metadata
    try:
        for key in toml_path:
            value = value[key]
    except (KeyError, IndexError):
        return None
    return value
