"""
Java type-name rendering.

Hosts hand over field types either as source text (used verbatim) or as
JVM/JDT type signatures such as ``I``, ``[QString;`` or
``Ljava.util.Map<QString;QInteger;>;``, which are decoded to source text.
"""

from typing import Callable, Dict, List, Tuple

TypeRenderer = Callable[[str], str]

PRIMITIVE_SIGNATURES: Dict[str, str] = {
    "B": "byte",
    "C": "char",
    "D": "double",
    "F": "float",
    "I": "int",
    "J": "long",
    "S": "short",
    "Z": "boolean",
    "V": "void",
}


def render_verbatim(type_name: str) -> str:
    """Return the type name unchanged apart from surrounding whitespace."""
    return type_name.strip()


def signature_to_source(signature: str) -> str:
    """
    Decode a type signature into Java source text.

    Args:
        signature: Type signature, e.g. ``[[I`` or ``QList<+QNumber;>;``

    Returns:
        Source form, e.g. ``int[][]`` or ``List<? extends Number>``

    Raises:
        ValueError: If the signature is malformed
    """
    signature = signature.strip()
    if not signature:
        raise ValueError("Empty type signature")

    rendered, end = _parse_type(signature, 0)
    if end != len(signature):
        raise ValueError(
            f"Unexpected trailing characters in type signature: {signature!r}"
        )
    return rendered


def _parse_type(signature: str, pos: int) -> Tuple[str, int]:
    """Parse one type starting at ``pos``; return its source form and the next index."""
    if pos >= len(signature):
        raise ValueError(f"Truncated type signature: {signature!r}")

    char = signature[pos]

    if char in PRIMITIVE_SIGNATURES:
        return PRIMITIVE_SIGNATURES[char], pos + 1

    if char == "[":
        element, end = _parse_type(signature, pos + 1)
        return f"{element}[]", end

    if char in ("L", "Q"):
        return _parse_class_type(signature, pos + 1)

    if char == "T":
        end = signature.find(";", pos)
        if end == -1:
            raise ValueError(f"Unterminated type variable in signature: {signature!r}")
        return signature[pos + 1 : end], end + 1

    raise ValueError(f"Invalid type signature character {char!r} in {signature!r}")


def _parse_class_type(signature: str, pos: int) -> Tuple[str, int]:
    """Parse a class type body after its ``L``/``Q`` marker up to ``;``."""
    parts: List[str] = []

    while pos < len(signature):
        char = signature[pos]

        if char == ";":
            return "".join(parts), pos + 1

        if char == "<":
            arguments, pos = _parse_type_arguments(signature, pos + 1)
            parts.append(f"<{', '.join(arguments)}>")
            continue

        if char in ("/", "$"):
            parts.append(".")
        else:
            parts.append(char)
        pos += 1

    raise ValueError(f"Unterminated class type in signature: {signature!r}")


def _parse_type_arguments(signature: str, pos: int) -> Tuple[List[str], int]:
    """Parse type arguments after ``<`` up to the matching ``>``."""
    arguments = []

    while pos < len(signature):
        char = signature[pos]

        if char == ">":
            if not arguments:
                raise ValueError(f"Empty type argument list in {signature!r}")
            return arguments, pos + 1

        if char == "*":
            arguments.append("?")
            pos += 1
        elif char == "+":
            bound, pos = _parse_type(signature, pos + 1)
            arguments.append(f"? extends {bound}")
        elif char == "-":
            bound, pos = _parse_type(signature, pos + 1)
            arguments.append(f"? super {bound}")
        else:
            argument, pos = _parse_type(signature, pos)
            arguments.append(argument)

    raise ValueError(f"Unterminated type argument list in {signature!r}")


TYPE_RENDERERS: Dict[str, TypeRenderer] = {
    "verbatim": render_verbatim,
    "signature": signature_to_source,
}


def get_type_renderer(mode: str) -> TypeRenderer:
    """
    Get the type renderer for a rendering mode.

    Raises:
        ValueError: If the mode is unknown
    """
    try:
        return TYPE_RENDERERS[mode]
    except KeyError:
        raise ValueError(
            f"Unknown type rendering: {mode}. Available: {', '.join(TYPE_RENDERERS)}"
        )
