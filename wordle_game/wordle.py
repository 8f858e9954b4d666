import logging
import random

from wordle_game.words import choose_target, is_letters

logger = logging.getLogger(__name__)

ABSENT = 0b00
PRESENT = 0b01
CORRECT = 0b10

# Letter status for the alphabet line
UNTRIED = 0
IN_WORD = 1
NOT_IN_WORD = 2

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# ANSI styles
_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_FG_BLACK = "\x1b[30m"
_FG_RED = "\x1b[31m"
_FG_YELLOW = "\x1b[33m"
_FG_BRIGHT_BLACK = "\x1b[90m"
_BG_GREEN = "\x1b[42m"
_BG_YELLOW = "\x1b[43m"

class InvalidGuessError(ValueError):
	"""Guess rejected without using a try."""

class GuessLengthError(InvalidGuessError):
	pass

class GuessCharacterError(InvalidGuessError):
	pass

class UnknownWordError(InvalidGuessError):
	pass

def validate_guess(word: str, length: int) -> None:
	if len(word) != length:
		raise GuessLengthError(f"The word is {length} letters in length.")
	if not is_letters(word):
		raise GuessCharacterError("Only letters A-Z are allowed.")

def evaluate(guess: str, target: str) -> list[int]:
	"""
	Mark each position of `guess` against `target`.
	Greens first, then yellows by the target letters left unmatched, so a
	repeated letter never gets more marks than the target has copies of it.
	"""
	if len(guess) != len(target):
		raise ValueError("Guess and target must be the same length.")
	n = len(target)

	result = [ABSENT] * n
	remaining: dict[str, int] = {}

	for i in range(n):
		if guess[i] == target[i]:
			result[i] = CORRECT
		else:
			ch = target[i]
			remaining[ch] = remaining.get(ch, 0) + 1

	for i in range(n):
		if result[i] != CORRECT:
			ch = guess[i]
			if remaining.get(ch, 0) > 0:
				result[i] = PRESENT
				remaining[ch] -= 1

	return result

class WordleResult:
	def __init__(self, guess: str, result: list[int]):
		self.guess = guess.lower()
		self.result = result

	@property
	def solved(self) -> bool:
		return all(state == CORRECT for state in self.result)

	def render(self, color: bool = True) -> str:
		parts = []
		for ch, state in zip(self.guess.upper(), self.result):
			if not color:
				if state == CORRECT:
					parts.append(f"[{ch}]")
				elif state == PRESENT:
					parts.append(f"({ch})")
				else:
					parts.append(f" {ch} ")
				continue
			if state == CORRECT:
				style = _BG_GREEN + _FG_BLACK + _BOLD
			elif state == PRESENT:
				style = _BG_YELLOW + _FG_BLACK + _BOLD
			else:
				style = _FG_BRIGHT_BLACK + _BOLD
			parts.append(f"{style}{ch}{_RESET}")
		return " ".join(parts) if color else "".join(parts)

	def __str__(self):
		return self.render()

class LetterTally:
	"""Which letters have been tried, and whether they occur in the target."""

	def __init__(self):
		self.statuses = {ch: UNTRIED for ch in ALPHABET}

	def status(self, letter: str) -> int:
		return self.statuses[letter.lower()]

	def update(self, guess: str, target: str) -> None:
		for ch in guess:
			if self.statuses.get(ch) == UNTRIED:
				self.statuses[ch] = IN_WORD if ch in target else NOT_IN_WORD

	def render(self, color: bool = True) -> str:
		out = []
		for ch in ALPHABET:
			state = self.statuses[ch]
			if state == NOT_IN_WORD:
				out.append(f"{_FG_RED}{ch}{_RESET}" if color else "_")
			elif state == IN_WORD:
				out.append(f"{_FG_YELLOW}{ch}{_RESET}" if color else ch.upper())
			else:
				out.append(ch)
		return "".join(out)

class Wordle:
	def __init__(self, word_list: list[str], target: str = None, length: int = 5,
			check_dictionary: bool = True, rng: random.Random = None):
		self.length = length
		self.word_list = [w for w in word_list or [] if len(w) == length and is_letters(w)]
		if not self.word_list:
			raise ValueError("word_list is absent.")
		self.words = set(self.word_list)
		self.check_dictionary = check_dictionary
		self.rng = rng
		if target:
			self.set_target(target)
		else:
			self.randomise_target()

	def randomise_target(self) -> str:
		self.target = choose_target(self.word_list, self.length, self.rng)
		logger.debug("Target word chosen: %s", self.target)
		return self.target

	def set_target(self, target: str):
		if target not in self.words:
			raise ValueError(f"Target word '{target}' is not in the word list.")
		self.target = target

	def is_valid_word(self, word: str) -> bool:
		return word in self.words

	def guess(self, word: str) -> WordleResult:
		guess = word.strip()
		# lower() maps some non-ASCII letters onto a-z
		if not guess.isascii():
			raise GuessCharacterError("Only letters A-Z are allowed.")
		guess = guess.lower()
		validate_guess(guess, self.length)
		if self.check_dictionary and not self.is_valid_word(guess):
			raise UnknownWordError("Please use a valid word.")
		return WordleResult(guess, evaluate(guess, self.target))
