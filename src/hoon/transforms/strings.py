"""String helpers: padding and template compilation."""

from typing import Callable, Dict, Mapping
from jinja2 import Environment, StrictUndefined
from ..utils.validation import ValidationUtils
from ..types import ContractError


# <%= expr %> interpolates, <% stmt %> is a block, <%# ... %> a comment
_TEMPLATE_ENVIRONMENT = Environment(
    variable_start_string="<%=",
    variable_end_string="%>",
    block_start_string="<%",
    block_end_string="%>",
    comment_start_string="<%#",
    comment_end_string="%>",
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def padding(text: str, length: int, char: str, pad_right: bool = False) -> str:
    """
    Pad ``text`` with whole repetitions of ``char`` up to ``length``.

    The number of repetitions is ``floor((length - len(text)) / len(char))``.
    When that is below one the text is returned unchanged, so nothing is
    ever truncated and a partial ``char`` is never emitted.

    Args:
        text: String to pad
        length: Target length
        char: Pad unit, may be longer than one character
        pad_right: Append the padding instead of prepending it

    Returns:
        Padded string
    """
    ValidationUtils.require_str(text, "text")
    ValidationUtils.require_str(char, "char", allow_empty=False)
    if isinstance(length, bool) or not isinstance(length, int):
        raise ContractError(f"length must be int, got {type(length).__name__}")

    count = (length - len(text)) // len(char)
    if count < 1:
        return text

    pad = char * count
    return text + pad if pad_right else pad + text


def templates(sources: Mapping[str, str]) -> Dict[str, Callable[..., str]]:
    """
    Compile a mapping of template sources into render functions.

    Each render function accepts a context mapping and/or keyword
    arguments. Referencing a name missing from the context raises
    ``jinja2.UndefinedError``.

    Example:
        >>> render = templates({"hello": "Hello, <%= name %>."})
        >>> render["hello"]({"name": "John"})
        'Hello, John.'
    """
    ValidationUtils.require_mapping(sources, "sources")

    compiled = {}
    for name, source in sources.items():
        ValidationUtils.require_str(source, f"sources[{name!r}]")
        compiled[name] = _TEMPLATE_ENVIRONMENT.from_string(source).render
    return compiled
