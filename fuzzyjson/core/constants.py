"""
Common constants used across the fuzzyjson grammar.
"""

# Ordered alternatives: the first spelling that prefixes the input wins
NULL_SPELLINGS = ("null", "Null", "NULL", "NUL", "Nil", "nil", "None", "Nothing")
TRUE_SPELLINGS = ("true", "True", "TRUE", "yes", "Yes", "YES")
FALSE_SPELLINGS = ("false", "False", "FALSE", "no", "No", "NO")

# Unicode White_Space characters (str.isspace also accepts \x1c-\x1f)
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# A comment runs from its marker to the end of the line
COMMENT_MARKERS = ("//", "#", ";", "--")

STRING_DELIMITERS = ('"', "'")

# Escape sequences understood inside string literals (character after "\")
ESCAPE_MAP = {
    "\\": "\\",
    '"': '"',
    "'": "'",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

DIGIT_SEPARATOR = "_"

# Extra characters allowed to start an unquoted dictionary key
IDENTIFIER_HEAD_EXTRA = "_#@"

INT128_MIN = -(2**127)
INT128_MAX = 2**127 - 1


def get_value_start_chars() -> frozenset[str]:
    """Get every character that can begin a value at the top level."""
    starts = set("{[-.0123456789")
    starts.update(STRING_DELIMITERS)
    for spelling in NULL_SPELLINGS + TRUE_SPELLINGS + FALSE_SPELLINGS:
        starts.add(spelling[0])
    return frozenset(starts)
