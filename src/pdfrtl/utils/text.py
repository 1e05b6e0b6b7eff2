"""Text utilities for RTL rendering."""

_PAREN_SWAP = str.maketrans({"(": ")", ")": "("})


def swap_parentheses(text: str) -> str:
    """
    Swap opening and closing parentheses.

    Parenthesis glyphs are mirrored when text is laid out right to left, but
    drawing a pre-ordered RTL string does not mirror them. Swapping restores
    the intended visual pairing.

    Args:
        text: Input text with parentheses.

    Returns:
        Text with every "(" replaced by ")" and vice versa.

    Examples:
        >>> swap_parentheses("(مرحبا)")
        ")مرحبا("
    """
    return text.translate(_PAREN_SWAP)
