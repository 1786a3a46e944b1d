"""
Grammatical gender agreement for dual-form tags.

A gender-pair tag is written "@word1/word2": word1 is the masculine (default)
form, word2 either a feminine suffix ("בוא/י" -> "בואי") or the full feminine
word. Pairs whose forms don't follow the suffix rule are listed explicitly.
"""

from typing import Optional

from golden.contexts.content.content_data_structure import Gender

# body -> (masculine, feminine)
GENDER_PAIRS = {
    "את/ה": ("אתה", "את"),
    "מוכן/ה": ("מוכן", "מוכנה"),
    "בוא/י": ("בוא", "בואי"),
    "תוכל/י": ("תוכל", "תוכלי"),
    "תרצה/י": ("תרצה", "תרצי"),
    "עשית/ה": ("עשית", "עשית"),
}

# Hebrew final letter forms become regular forms when a suffix follows
FINAL_TO_REGULAR = {"ך": "כ", "ם": "מ", "ן": "נ", "ף": "פ", "ץ": "צ"}

# Second branches this short are suffixes, longer ones are whole words
MAX_SUFFIX_LENGTH = 2


def is_gender_pair(body: str) -> bool:
    """True for a tag body shaped "word1/word2" with both sides non-empty."""
    first, sep, second = body.partition("/")
    return bool(sep and first and second)


def _attach_suffix(stem: str, suffix: str) -> str:
    if stem and stem[-1] in FINAL_TO_REGULAR:
        stem = stem[:-1] + FINAL_TO_REGULAR[stem[-1]]
    return stem + suffix


def masculine_form(body: str) -> str:
    if body in GENDER_PAIRS:
        return GENDER_PAIRS[body][0]
    return body.partition("/")[0]


def feminine_form(body: str) -> str:
    if body in GENDER_PAIRS:
        return GENDER_PAIRS[body][1]
    first, _, second = body.partition("/")
    if len(second) <= MAX_SUFFIX_LENGTH:
        return _attach_suffix(first, second)
    return second


def resolve_gender_pair(body: str, gender: Optional[Gender]) -> str:
    """
    Pick the branch of a gender pair that agrees with the user's gender.

    Args:
        body: Tag body without the leading "@" (e.g., "בוא/י")
        gender: User gender; None or BOTH means unknown

    Returns:
        Masculine form for male, feminine form for female, and the pair as
        written ("בוא/י") when gender is unknown
    """
    if gender == Gender.MALE:
        return masculine_form(body)
    if gender == Gender.FEMALE:
        return feminine_form(body)
    return body
