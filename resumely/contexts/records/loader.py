"""Load resume records from YAML or JSON files."""

from pathlib import Path
from typing import Union

from omegaconf import DictConfig, OmegaConf

from resumely.contexts.records.resume_record import ResumeRecord


def load_resume_record(path: Union[str, Path]) -> ResumeRecord:
    """
    Load a resume record file into a ResumeRecord.

    JSON is a subset of YAML, so both exported storage documents and
    hand-written YAML fixtures load through OmegaConf.

    Args:
        path: Path to a .yaml, .yml, or .json file

    Returns:
        ResumeRecord instance

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file's top level is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Resume record not found: {path}")

    config = OmegaConf.load(path)
    if not isinstance(config, DictConfig):
        raise ValueError(f"Invalid resume record: top level of {path} must be a mapping")

    data = OmegaConf.to_container(config, resolve=True)

    # Exported documents are sometimes wrapped as {"resume": {...}}
    if set(data) == {"resume"}:
        data = data["resume"]

    return ResumeRecord.from_dict(data)
