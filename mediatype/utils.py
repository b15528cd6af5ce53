import json

import yaml
from typing import Any  # noqa


def serialize_to_json(data: Any) -> str:
    """Serialize to pretty printed JSON.

    This includes using 2 space indentation, no trailing whitespace, and
    including a newline at the end of the JSON document.

    """
    return json.dumps(data, indent=2, separators=(',', ': ')) + '\n'


def serialize_to_yaml(data: Any) -> str:
    # Keep the key order of ``data`` so parameters are listed in the
    # order they were given.
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
