import logging
import sys

from wordle_game.wordle import InvalidGuessError, LetterTally, Wordle
from wordle_game.words import load_word_list

logger = logging.getLogger(__name__)

class Configuration:
	"""Wordle configuration."""

	def __init__(self, guess_tries: int = 6, guess_letters: int = 5,
			check_dictionary: bool = True, color: bool = None):
		# Number of guess tries before the game is over
		self.guess_tries = guess_tries
		# Number of letters in the word to be guessed
		self.guess_letters = guess_letters
		# Reject guesses that are not in the word list
		self.check_dictionary = check_dictionary
		# None means colour only when writing to a terminal
		self.color = color

	def use_color(self, stream) -> bool:
		if self.color is not None:
			return self.color
		isatty = getattr(stream, "isatty", None)
		return bool(isatty and isatty())

def play(game: Wordle, config: Configuration = None, read=None, out=None) -> dict:
	"""
	Run one game: prompt, evaluate and print until the word is guessed or the
	tries run out. Rejected guesses are reported and do not use a try.
	EOFError and OSError from reading or writing propagate.
	"""
	config = config or Configuration()
	read = read or input
	out = out or sys.stdout
	color = config.use_color(out)

	tally = LetterTally()
	results = []
	tries = 0

	while tries < config.guess_tries:
		out.write(tally.render(color) + " ")
		out.write(f"({tries + 1}/{config.guess_tries})> ")
		out.flush()

		line = read()
		try:
			result = game.guess(line)
		except InvalidGuessError as e:
			logger.debug("Rejected guess %r: %s", line, e)
			out.write(f"{e}\n")
			continue

		tries += 1
		results.append(result)
		out.write(result.render(color) + "\n")

		if result.solved:
			break

		tally.update(result.guess, game.target)

	success = bool(results) and results[-1].solved
	out.write("\n")
	if success:
		out.write(f"Solved in {tries}/{config.guess_tries}.\n")
	else:
		out.write(f"The word was: {game.target}\n")
	out.flush()

	return {
		"success": success,
		"guesses": tries,
		"target": game.target,
		"results": results,
	}

def init_words(config: Configuration) -> list[str]:
	words = load_word_list(length=config.guess_letters)
	if not words:
		print("Failed to load word list.")
		raise SystemExit(1)
	return words

def main() -> None:
	logging.basicConfig(level=logging.WARNING)
	config = Configuration()
	words = init_words(config)

	game = Wordle(words, length=config.guess_letters, check_dictionary=config.check_dictionary)

	try:
		play(game, config)
	except EOFError:
		sys.stderr.write("\nNo more input.\n")
		raise SystemExit(1)
	except OSError as e:
		sys.stderr.write(f"\nI/O error: {e}\n")
		raise SystemExit(1)

if __name__ == "__main__":
	main()
