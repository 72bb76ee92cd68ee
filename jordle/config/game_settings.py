"""
Game Configuration Constants Module

Defines the rules of a single-player game and loads the word list that
target words are drawn from. All game parameters are centralized here.
"""

import json
import os
import string
from typing import Dict, List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in the target word and in every guess.
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of accepted guesses per game.
"""

ALPHABET: Final[str] = string.ascii_lowercase


def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of lowercase words of WORD_LENGTH letters

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = [word.strip() for word in word_list]

    for word in words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        # Checked before lowercasing: some non-ASCII characters lowercase to a-z
        if not all(char in string.ascii_letters for char in word):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return [word.lower() for word in words]


# Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.

    Checks that every word has WORD_LENGTH letters, uses only a-z in
    lowercase, and appears exactly once.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not all(char in ALPHABET for char in word):
            raise ValueError(f"Word at index {index} '{word}' is not lowercase a-z")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str] = WORD_LIST) -> Dict:
    """
    Summarizes the word list: size, average vowel count and letter frequency.
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
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
        print(f" Game statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
