"""JSON bridge for Attributes.

Attributes only knows how to project itself to a plain dict (to_json()).
AttributesJSONEncoder plugs that projection into the stdlib json pipeline,
including Attributes nested inside lists, dicts or other attribute values.

    dumps(attrs)                          # '{"name": "Alice"}'
    json.dumps(payload, cls=AttributesJSONEncoder)
"""

from __future__ import annotations

import json
from typing import Any

from allkit.attributes import Attributes


class AttributesJSONEncoder(json.JSONEncoder):
    """JSONEncoder that serializes Attributes through to_json()."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Attributes):
            return o.to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps with Attributes support. Extra kwargs go to json.dumps."""
    kwargs.setdefault("cls", AttributesJSONEncoder)
    return json.dumps(obj, **kwargs)
