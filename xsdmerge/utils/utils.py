import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

from xsdmerge import document
from xsdmerge.merge import Merger
from xsdmerge.model import CASE_SENSITIVE, CasePolicy, Node

logger = logging.getLogger(__name__)


def collect_inputs(path: Union[str, Path], extension: str = ".xsd") -> List[Path]:
    """Find the schema files to merge.

    A single file is used as is, a directory contributes all the files
    with the matching extension, sorted by name so runs are repeatable.
    """
    path = Path(path)
    if path.is_file():
        if path.suffix != extension:
            raise ValueError(f"{path} is not a {extension} file")
        return [path]
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    if not path.is_dir():
        raise ValueError(f"{path} is neither a file nor a directory")

    return sorted(
        (p for p in path.iterdir() if p.is_file() and p.suffix == extension),
        key=lambda p: p.name,
    )


def load_type_overrides(path: Union[str, Path]) -> Dict[str, str]:
    """Load a `{schema type: C++ type}` table from a JSON file."""
    with open(path, "r") as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(overrides).__name__}")
    for k, v in overrides.items():
        if not isinstance(v, str):
            raise ValueError(f"Override for {k} in {path} must be a string, got {v!r}")
    return overrides


def merge_files(paths: Iterable[Union[str, Path]], policy: CasePolicy = CASE_SENSITIVE) -> Node:
    """Load each file in turn and fold it into a single tree."""
    merger = Merger(policy)
    out = Node.document()
    for p in paths:
        logger.info(f"Processing {p}")
        merger.merge(document.load(p), out)
    return out
