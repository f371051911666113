"""
Convert — Преобразования координата ↔ код меша
"""

from jismesh.convert.decoder import decode, decode_center, south_west_corner
from jismesh.convert.encoder import encode

__all__ = [
    "encode",
    "decode",
    "decode_center",
    "south_west_corner",
]
