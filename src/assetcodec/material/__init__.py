"""Material definition parsing with include/patch resolution."""

from .model import OVERRIDE_BLOCKS, PATCH_SHADER, MaterialDefinition
from .properties import MaterialProperties, extract_properties, parse_color
from .parser import load_material, parse_material_text, resolve_include

__all__ = [
    "OVERRIDE_BLOCKS",
    "PATCH_SHADER",
    "MaterialDefinition",
    "MaterialProperties",
    "extract_properties",
    "parse_color",
    "load_material",
    "parse_material_text",
    "resolve_include",
]
