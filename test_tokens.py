import pytest
from wordchain.tokens import (
    capitalize_first,
    chomp,
    has_sentence_terminator,
    is_terminal_word,
    normalize_word,
    sentence_terminator,
    tokenize,
)

# (token, is terminal)
terminal_cases = [
    ("cat.", True),
    ("Mr.", False),
    ("Hello", False),
    ("A.", False),
    ("U.S.", False),
    ("Dr.", False),
    ("wait?", True),
    ("stop!", True),
    ("cat.  ", True),
    (".", False),
    ("", False),
]

# (token, normalized key)
normalize_cases = [
    ("cat", "cat"),
    ("cat.", "cat"),
    ("cat. ", "cat"),
    ("wait?!", "wait"),
    ("Mr.", "Mr"),
    ("", ""),
]


@pytest.mark.parametrize("token,expected", terminal_cases)
def test_terminal_word_classification(token, expected):
    """
    Test which tokens count as the end of a sentence.
    """
    assert is_terminal_word(token) is expected


@pytest.mark.parametrize("token,expected", normalize_cases)
def test_normalize_word(token, expected):
    """
    Test the canonical key used for graph node identity.
    """
    assert normalize_word(token) == expected


def test_sentence_terminator():
    """
    Test detection of the trailing terminator after chomping spaces.
    """
    assert sentence_terminator("cat.") == "."
    assert sentence_terminator("why? ") == "?"
    assert sentence_terminator("no!  ") == "!"
    assert sentence_terminator("cat") is None
    assert has_sentence_terminator("Mr.")
    assert not has_sentence_terminator("word")


def test_chomp_only_removes_trailing_spaces():
    """
    Test that chomp leaves leading spaces and punctuation alone.
    """
    assert chomp("  cat.  ") == "  cat."


def test_tokenize():
    """
    Test whitespace tokenizing with punctuation kept on the words.
    """
    assert tokenize("  The cat\n sat.  Did it? ") == ["The", "cat", "sat.", "Did", "it?"]
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_capitalize_first():
    """
    Test that only the first character is upper-cased.
    """
    assert capitalize_first("the cat") == "The cat"
    assert capitalize_first("iPhone") == "IPhone"
    assert capitalize_first("") == ""
