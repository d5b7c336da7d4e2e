import json
from pathlib import Path
from typing import Any

from prisma_arktype.models import Datamodel


def parse_datamodel(document: dict[str, Any]) -> Datamodel:
    """Accept a full DMMF document (``{"datamodel": ...}``) or a bare datamodel."""
    if "datamodel" in document:
        document = document["datamodel"]
    if not isinstance(document, dict) or "models" not in document:
        raise ValueError("Document does not contain a Prisma datamodel (missing 'models').")
    return Datamodel.model_validate(document)


def load_datamodel(path: str | Path) -> Datamodel:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Schema file not found: {path}") from None
    return parse_datamodel(json.loads(text))
