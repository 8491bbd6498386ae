"""
strvalidator Constants

Character sets and patterns shared by the built-in rules.
"""

# Matches anywhere in the evaluated string; not anchored.
EMAIL_RE = (
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

NUMBER = "0123456789"
ALPHABET_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_UPPERCASE = ALPHABET_LOWERCASE.upper()
ALPHABET = ALPHABET_LOWERCASE + ALPHABET_UPPERCASE
ALPHANUMERIC = ALPHABET + NUMBER
SPECIAL_CHARACTERS = "@~_/+*-.,;:!?¡¿#$%&=()[]{}<>'\"|\\^`"
