"""assetcodec: asset codecs for a level decompiler.

Three independent components share only the ambient modules:

- ``assetcodec.mapfile``: entity/brush model to Radiant ``.map`` text
- ``assetcodec.texture``: texture container header and payload decoding
- ``assetcodec.material``: material definitions with include resolution
"""

__version__ = "0.1.0"

from .errors import CodecError
from .mapfile import Entity, MapFormat, serialize
from .material import MaterialDefinition, load_material, parse_material_text
from .texture import DecodedTexture, TextureHeader, decode_header, decode_texture

__all__ = [
    "__version__",
    "CodecError",
    "Entity",
    "MapFormat",
    "serialize",
    "MaterialDefinition",
    "load_material",
    "parse_material_text",
    "DecodedTexture",
    "TextureHeader",
    "decode_header",
    "decode_texture",
]
