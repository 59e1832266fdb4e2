"""src/urlhelper/expression.py

URL parts expressions: parsing and rendering.

An expression is a dot-separated list of part names, e.g.
``'scheme.host.port.dir.file.ext'``. The word ``base`` is shorthand for
``'scheme.user.pass.host.port'``. Parts are always written out in the same
order, whatever their order in the expression.
"""

from typing import FrozenSet, List

from urlhelper.parts import Part, UrlParts

__all__ = [
    "BASE_EXPRESSION",
    "DEFAULT_EXPRESSION",
    "parse_expression",
    "render",
]

BASE_EXPRESSION = "scheme.user.pass.host.port"
DEFAULT_EXPRESSION = "scheme.user.pass.host.port.dir.file.ext.query.fragment"

_VALUES = frozenset(part.value for part in Part)


def parse_expression(expression: str) -> FrozenSet[Part]:
    """
    Parse an expression into the set of parts it names.

    'base' is replaced wherever it occurs as a substring, not only as a
    whole token. Unknown tokens are ignored.
    """
    expression = expression.replace("base", BASE_EXPRESSION)
    return frozenset(
        Part(token) for token in expression.split(".") if token in _VALUES
    )


def render(parts: UrlParts, expression: str = DEFAULT_EXPRESSION) -> str:
    """
    Build a URL string from the parts named by the expression.

    Parts that are empty in ``parts`` are dropped even when requested.
    """
    selected = {part for part in parse_expression(expression) if parts.value(part)}

    out: List[str] = []
    if Part.SCHEME in selected:
        out.append(f"{parts.scheme}:")
    if Part.HOST in selected:
        out.append("//")
    if Part.USER in selected:
        out.append(parts.user)
    if Part.PASS in selected:
        out.append(f":{parts.password}")
    if Part.USER in selected:
        out.append("@")
    if Part.HOST in selected:
        out.append(parts.host)
    if Part.PORT in selected:
        out.append(f":{parts.port}")
    if Part.DIR in selected:
        out.append(parts.dir)
    if Part.FILE in selected:
        out.append(parts.file)
    if Part.FILE in selected and Part.EXT in selected:
        out.append(".")
    if Part.EXT in selected:
        out.append(parts.ext)
    if Part.QUERY in selected:
        out.append(f"?{parts.query}")
    if Part.FRAGMENT in selected:
        out.append(f"#{parts.fragment}")
    return "".join(out)
