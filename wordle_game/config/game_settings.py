"""
Game Configuration Constants Module

Game rules and the candidate word list. The word list is loaded from
words.json next to this module and validated on import.
"""

import json
import os
from typing import Dict, List, Final, Optional, Sequence

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and every guess row."""

MAX_ATTEMPTS: Final[int] = 6
"""Number of guess rows in the grid."""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON array file.

    Returns:
        List[str]: List of uppercase words of the given length

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = []
    for word in word_list:
        if not isinstance(word, str):
            raise ValueError(f"Word list entry {word!r} is not a string")
        word = word.strip().upper()
        if len(word) != word_length:
            raise ValueError(f"Word '{word}' is not {word_length} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        uppercase_words.append(word)

    return uppercase_words


WORD_LIST: Final[List[str]] = load_word_list()


def validate_word_list_integrity(word_list: Optional[Sequence[str]] = None,
                                 word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks length, alphabetic characters, uppercase formatting and
    uniqueness of every entry.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = WORD_LIST if word_list is None else list(word_list)

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: Optional[Sequence[str]] = None) -> Dict:
    """
    Letter statistics of a word list.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    words = WORD_LIST if word_list is None else list(word_list)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Word statistics: {stats}")
    except ValueError as config_error:
        print(f" Word list validation failed: {config_error}")
        raise SystemExit(1)
