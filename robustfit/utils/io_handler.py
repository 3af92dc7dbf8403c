"""JSON output for fit results."""

import json
import numpy as np
from pathlib import Path
from typing import Dict


def _to_builtin(value):
    """Convert numpy scalars and arrays so json can encode them."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONWriter:
    """Write fit results to JSON."""

    @staticmethod
    def save_results(output_dict: Dict, output_path: str, indent: int = 2):
        """Save results to JSON file."""
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(output_dict, f, indent=indent, default=_to_builtin)

    @staticmethod
    def load_results(input_path: str) -> Dict:
        """Load results from JSON file."""
        with open(input_path, 'r') as f:
            return json.load(f)
