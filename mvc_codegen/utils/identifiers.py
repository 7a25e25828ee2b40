import re

from ..core import constants as cs

_NON_IDENTIFIER_CHARS = re.compile(r"\W")

# C# reserved keywords; contextual keywords are valid identifiers
_RESERVED_WORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)


def sanitize_identifier(name: str) -> str:
    """Maps a file or folder name onto a valid member identifier.

    `Edit-Profile` becomes `Edit_Profile` and `404` becomes `_404`. Reserved
    words get the same underscore prefix.
    """
    cleaned = _NON_IDENTIFIER_CHARS.sub("_", name)
    if not cleaned:
        return cs.IDENTIFIER_FALLBACK
    if cleaned[0].isdigit() or cleaned in _RESERVED_WORDS:
        return f"_{cleaned}"
    return cleaned


def trim_suffix(name: str, suffix: str) -> str:
    if suffix and name.endswith(suffix) and name != suffix:
        return name[: -len(suffix)]
    return name
