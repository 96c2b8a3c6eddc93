"""JSON text helpers: compact serialization and positional deserialization."""

from objtasks.serialize.codec import from_json, parse_json, to_json
from objtasks.serialize.errors import ParseError

__all__ = ["to_json", "parse_json", "from_json", "ParseError"]
