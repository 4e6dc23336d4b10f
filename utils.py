import re


def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__,
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def count_matches(pattern, text):
    """Counts the case-insensitive occurrences of the regular expression `pattern` in `text`.

    >>> count_matches("lorem", "Lorem ipsum, lorem IPSUM, LOREM")
    3
    >>> count_matches("ips.m", "Lorem ipsum, lorem IPSUM")
    2
    >>> count_matches("dolor", "")
    0
    """
    return sum(1 for _ in re.finditer(pattern, text, re.IGNORECASE))
