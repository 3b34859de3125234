"""Stable global identifiers for model entities.

Handles are only meaningful inside one SimpleModel. Each entity also gets
an IFC-compatible GlobalId (22-char compressed GUID) so that entities from
two separately built models can never be mistaken for one another.
"""

from __future__ import annotations

import uuid

import ifcopenshell.guid


def generate_ifc_id() -> str:
    """Generate a new IFC-compatible GlobalId (22 characters)."""
    return ifcopenshell.guid.compress(uuid.uuid4().hex)

