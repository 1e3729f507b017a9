"""Call-site lexing: literal scanning, argument splitting and length checks."""

from lexer.errors import ParseFailure, StructuralParseError


def __getattr__(name: str) -> object:
    if name in {"analyze", "analyze_site"}:
        from lexer.analyze import analyze, analyze_site

        return {"analyze": analyze, "analyze_site": analyze_site}[name]

    if name in {"split_arguments", "scan_literal", "validate_call", "SourceWindow"}:
        from lexer.arguments import split_arguments
        from lexer.literal import scan_literal
        from lexer.validator import validate_call
        from lexer.window import SourceWindow

        return {
            "split_arguments": split_arguments,
            "scan_literal": scan_literal,
            "validate_call": validate_call,
            "SourceWindow": SourceWindow,
        }[name]

    msg = f"module 'lexer' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ParseFailure",
    "SourceWindow",
    "StructuralParseError",
    "analyze",
    "analyze_site",
    "scan_literal",
    "split_arguments",
    "validate_call",
]
