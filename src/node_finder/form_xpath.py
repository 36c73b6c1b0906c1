"""
XPath builders for form controls.

Each builder takes the human-facing identifier of a control (its id, name,
or the text of its label) and returns an XPath expression relative to the
current scope.
"""


def literal(value: str) -> str:
    """Quote ``value`` as an XPath string literal."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    # Both quote kinds present: stitch the pieces together with concat().
    parts = value.split("'")
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f"'{part}'")
        if i < len(parts) - 1:
            pieces.append('"\'"')
    return f"concat({', '.join(pieces)})"


def _labelled(controls: str, predicate: str, query: str) -> str:
    label = f"//label[normalize-space(string(.)) = {literal(query)}]"
    by_attrs = f"{predicate} or ./@id = {label}/@for"
    return f".//{controls}[{by_attrs}] | .{label}//{controls}"


def _input_of_type(input_type: str) -> str:
    return f"input[./@type = '{input_type}']"


def fillable_field(query: str) -> str:
    """Inputs and textareas that accept typed text, by id, name, placeholder or label."""
    q = literal(query)
    excluded = " or ".join(
        f"./@type = '{t}'" for t in ("submit", "image", "radio", "checkbox", "hidden")
    )
    controls = f"*[self::input or self::textarea][not({excluded})]"
    return _labelled(controls, f"./@id = {q} or ./@name = {q} or ./@placeholder = {q}", query)


def radio_button(query: str) -> str:
    """Radio inputs by id, name or label."""
    q = literal(query)
    return _labelled(_input_of_type("radio"), f"./@id = {q} or ./@name = {q}", query)


def checkbox(query: str) -> str:
    """Checkbox inputs by id, name or label."""
    q = literal(query)
    return _labelled(_input_of_type("checkbox"), f"./@id = {q} or ./@name = {q}", query)


__all__ = [
    "literal",
    "fillable_field",
    "radio_button",
    "checkbox",
]
