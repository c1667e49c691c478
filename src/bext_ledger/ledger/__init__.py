from .models import DEFAULT_LABEL, Entry, EntryKind, Hierarchy, HierarchyNode, Timestamp
from .parser import build_entry, parse_file, parse_lines
from .timestamps import DateInferenceError, TimestampResolver
from .tokenizer import FIELD_RULES, RawFields, tokenize_line

__all__ = [
    "DEFAULT_LABEL",
    "Entry",
    "EntryKind",
    "Hierarchy",
    "HierarchyNode",
    "Timestamp",
    "build_entry",
    "parse_file",
    "parse_lines",
    "DateInferenceError",
    "TimestampResolver",
    "FIELD_RULES",
    "RawFields",
    "tokenize_line",
]
