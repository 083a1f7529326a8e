"""Binary and text codecs for game-data tables."""

from .slb import BUILTIN_FILE_TYPES, TableCodec
from .yaml_codec import YamlCodec

__all__ = ["BUILTIN_FILE_TYPES", "TableCodec", "YamlCodec"]
