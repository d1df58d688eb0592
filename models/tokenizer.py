"""Command-line tokenizer.

Splits a raw command line into argv-style tokens and applies whole-token
variable substitution. The rules are deliberately small:

- a double quote toggles quoting and is never emitted,
- space or tab outside quotes ends a token; empty tokens are dropped,
- there is no escape character,
- an unterminated quote closes silently at end of input,
- a token whose first character is "$" is replaced by the value of the
  variable named by the rest of the token ("" if unset).
"""

from models.environment import EnvironmentStore

QUOTE = '"'
SEPARATORS = (" ", "\t")
VARIABLE_PREFIX = "$"


def split_tokens(raw: str) -> list[str]:
    """Split raw into tokens honoring double quotes. Never raises."""
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in raw:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char in SEPARATORS and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))

    return tokens


def substitute(token: str, env: EnvironmentStore) -> str:
    """Replace a whole "$NAME" token by its value; leave other tokens alone."""
    if token.startswith(VARIABLE_PREFIX):
        return env.get(token[len(VARIABLE_PREFIX):])
    return token


def tokenize(raw: str, env: EnvironmentStore) -> list[str]:
    """Split raw into tokens, then substitute variables.

    Args:
        raw: One sub-command's text.
        env: Store supplying variable values.

    Returns:
        The tokens. A substituted unset variable yields an empty token.

    Example:
        >>> tokenize('echo "a b" c', env)
        ['echo', 'a b', 'c']
        >>> tokenize('echo $HOME', env)
        ['echo', '/home/user']
    """
    return [substitute(token, env) for token in split_tokens(raw)]
