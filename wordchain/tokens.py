"""
Token rules shared by both models.

Tokens are whitespace-split words with punctuation left attached, e.g.
"cat." or "Mr.". Empty strings are accepted as ordinary words; nothing here
rejects them.
"""
import re

PERIOD = "."
QUESTION = "?"
EXCLAMATION = "!"
TERMINATORS = (PERIOD, QUESTION, EXCLAMATION)

# Lowercased, without the trailing period.
ABBREVIATIONS = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "rev", "sr", "jr", "st", "mt",
    "gen", "col", "capt", "lt", "sgt", "vs",
})

def chomp(token: str) -> str:
    return token.rstrip(" ")

def sentence_terminator(token: str):
    """
    Returns ".", "?" or "!" if the token (after trailing spaces are trimmed)
    ends in one, otherwise None.
    """
    chomped = chomp(token)
    for terminator in TERMINATORS:
        if chomped.endswith(terminator):
            return terminator
    return None

def has_sentence_terminator(token: str) -> bool:
    return sentence_terminator(token) is not None

def is_terminal_word(token: str) -> bool:
    """
    A token ends a sentence when it carries a terminator and the text in front
    of the first occurrence of that terminator is a real word: longer than one
    character (so initials like "A." or "U.S." don't count) and not a known
    abbreviation like "Mr.".
    """
    terminator = sentence_terminator(token)
    if terminator is None:
        return False
    head = token.split(terminator, 1)[0]
    if len(head) <= 1:
        return False
    return head.lower() not in ABBREVIATIONS

def strip_terminators(token: str) -> str:
    return token.rstrip("".join(TERMINATORS))

def normalize_word(token: str) -> str:
    """
    Canonical key for a token: trailing spaces and terminators removed.
    """
    return strip_terminators(chomp(token))

def capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]

def tokenize(text: str) -> list:
    """
    Split raw text into tokens on whitespace, keeping punctuation attached.
    """
    return re.split(r"\s+", text.strip()) if text and text.strip() else []
