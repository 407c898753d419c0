"""Load a runner's suite tree from a JSON or YAML dump."""

import json
import logging
from pathlib import Path

import yaml

from boostsec.report_normalizer.models.raw import RawSuite

logger = logging.getLogger(__name__)


def load_suite_tree(results_path: Path) -> RawSuite:
    """Load the root suite from a results file.

    Files with a ``.json`` suffix are parsed as JSON, anything else as YAML.

    Args:
        results_path: Path to the JSON or YAML results file

    Returns:
        Parsed root suite

    Raises:
        FileNotFoundError: If the results file doesn't exist
        ValueError: If the file is empty, unparsable or doesn't match schema

    """
    if not results_path.exists():
        raise FileNotFoundError(f"Results file not found: {results_path}")

    try:
        with results_path.open(encoding="utf-8") as f:
            if results_path.suffix.lower() == ".json":
                text = f.read()
                data = json.loads(text) if text.strip() else None
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid results file {results_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty results file: {results_path}")

    try:
        suite = RawSuite.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid suite tree schema in {results_path}: {e}") from e

    logger.info(f"Loaded suite tree from {results_path}")
    return suite
