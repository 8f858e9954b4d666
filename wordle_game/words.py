import logging
import os
import random

logger = logging.getLogger(__name__)

WORD_LIST_PATH = os.path.join(os.path.dirname(__file__), 'wordle-nyt-answers-alphabetical.txt')

# Title line and a blank line precede the words.
HEADER_LINES = 2

def is_letters(word: str) -> bool:
	return bool(word) and all("a" <= ch <= "z" for ch in word)

def sanitize_word(word: str) -> str:
	word = word.strip().lower()
	return "".join(ch for ch in word if "a" <= ch <= "z")

def words_list(text: str, length: int, skip: int = HEADER_LINES) -> list[str]:
	"""Filter corpus text down to the words of exactly `length` letters."""
	lines = text.split("\n")[skip:]
	return [w for w in map(sanitize_word, lines) if len(w) == length]

def load_word_list(path: str = WORD_LIST_PATH, length: int = 5) -> list[str]:
	"""Load the word list from the specified file."""
	try:
		with open(path, 'r') as file:
			words = words_list(file.read(), length)
	except FileNotFoundError:
		logger.error("The word list file '%s' was not found.", path)
		return []
	except OSError as e:
		logger.error("An error occurred while loading the word list: %s", e)
		return []
	logger.debug("Loaded %d words of length %d from %s", len(words), length, path)
	return words

def choose_target(words: list[str], length: int = None, rng: random.Random = None) -> str:
	words = [w for w in words if is_letters(w) and (length is None or len(w) == length)]
	if not words:
		raise ValueError("word list is empty, cannot choose a target.")
	return (rng or random).choice(words)
