"""
Material catalog helpers used by the configurator bootstrap route.
"""

import logging
from typing import List

from pydantic import ValidationError

from .desk_spec import MaterialType
from .schemas import MaterialRecord

logger = logging.getLogger(__name__)

# Korean display names shown in the storefront
MATERIAL_NAMES_KO = {
    MaterialType.WOOD.value: "원목",
    MaterialType.MDF.value: "MDF",
    MaterialType.STEEL.value: "스틸",
    MaterialType.METAL.value: "메탈",
    MaterialType.GLASS.value: "유리",
    MaterialType.FABRIC.value: "패브릭",
}

# Placeholder id the catalog uses for a retired option row
DISABLED_MATERIAL_ID = "disabled"


def material_display_name(material: str) -> str:
    """Korean name for a material id. Unknown ids are returned unchanged."""
    return MATERIAL_NAMES_KO.get(material, material)


def is_valid_material(material: str) -> bool:
    return material in MATERIAL_NAMES_KO


def list_materials() -> List[str]:
    return list(MATERIAL_NAMES_KO.keys())


def filter_materials(records) -> List[MaterialRecord]:
    """
    Drop inactive and placeholder rows from a catalog listing.

    A record is kept unless is_active is explicitly False or its id is
    "disabled". Anything that isn't a list yields []. Dict rows are parsed
    into MaterialRecord; rows that are neither a dict nor a MaterialRecord,
    or dicts that don't parse (no id), are skipped.
    """
    if not isinstance(records, list):
        return []

    kept = []
    for record in records:
        if isinstance(record, dict):
            try:
                record = MaterialRecord(**record)
            except ValidationError:
                logger.warning("Skipping malformed material row: %r", record)
                continue
        elif not isinstance(record, MaterialRecord):
            logger.warning("Skipping material row of type %s", type(record).__name__)
            continue
        if record.is_active is False:
            continue
        if record.id == DISABLED_MATERIAL_ID:
            continue
        kept.append(record)
    return kept


def default_material_records(inactive=()) -> List[MaterialRecord]:
    """
    Catalog rows built from the static material list.
    Ids listed in `inactive` are marked is_active=False.
    """
    return [
        MaterialRecord(
            id=material,
            name=material_display_name(material),
            is_active=material not in inactive,
        )
        for material in list_materials()
    ]
