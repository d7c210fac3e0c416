from envload.environment import EnvironmentTable, MappingEnvironment, ProcessEnvironment
from envload.errors import (
    InvalidKeyError,
    LeadingWhitespaceError,
    LineRuleError,
    ParseError,
    RemoteSourceError,
    UnquotedWhitespaceError,
)
from envload.loader import Loader, load, load_if_exists, load_string
from envload.parser.document import parse, parse_document, scan_document

__all__ = [
    "EnvironmentTable",
    "InvalidKeyError",
    "LeadingWhitespaceError",
    "LineRuleError",
    "Loader",
    "MappingEnvironment",
    "ParseError",
    "ProcessEnvironment",
    "RemoteSourceError",
    "UnquotedWhitespaceError",
    "load",
    "load_if_exists",
    "load_string",
    "parse",
    "parse_document",
    "scan_document",
]
