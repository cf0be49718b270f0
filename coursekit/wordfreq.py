"""Word-sequence frequencies from a sample text, with phrase reports and generation."""

from __future__ import annotations

import random
import string
import sys
from collections import Counter
from typing import Iterable, Iterator, Sequence

QUOTE = '"'
PARSE_METHODS = ("ignore_punctuation", "parsing_of_punctuation")

_LETTERS = frozenset(string.ascii_letters)
_SPACE = frozenset(string.whitespace)


class _Reader:
    """A cursor over text that hands out whitespace tokens or lowercased words."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def next_word(self) -> str | None:
        """The next word, a lone quote mark, or None once the text runs out.

        Letters are lowercased, other characters dropped. A word is only
        complete when whitespace or a quote mark follows it, so a word that
        runs into the end of the text is lost.
        """
        text = self.text
        word: list[str] = []
        while self.pos < len(text):
            char = text[self.pos]
            if char in _SPACE:
                self.pos += 1
                if word:
                    return "".join(word)
            elif char == QUOTE:
                if not word:
                    self.pos += 1
                    return QUOTE
                return "".join(word)
            elif char in _LETTERS:
                self.pos += 1
                word.append(char.lower())
            else:
                self.pos += 1
        return None

    def token(self) -> str | None:
        """The next run of non-whitespace characters, or None at the end."""
        text = self.text
        while self.pos < len(text) and text[self.pos] in _SPACE:
            self.pos += 1
        start = self.pos
        while self.pos < len(text) and text[self.pos] not in _SPACE:
            self.pos += 1
        return text[start:self.pos] or None


def _words(reader: _Reader) -> Iterator[str]:
    while (word := reader.next_word()) is not None:
        yield word


def tokenize(text: str) -> list[str]:
    """Split text into lowercase words, keeping quote marks as words of their own."""
    return list(_words(_Reader(text)))


def quoted_words(tokens: Iterable[str]) -> list[str]:
    """Collect words up to the closing quote mark; the quote marks are left out."""
    answer: list[str] = []
    open_quote = False
    for word in tokens:
        if word == QUOTE:
            if open_quote:
                break
            open_quote = True
        else:
            answer.append(word)
    return answer


def _pick_most(followers: dict[str, int]) -> str:
    """The most frequent follower, alphabetically first on a tie; empty if none."""
    best = ""
    top = 0
    for word in sorted(followers):
        if followers[word] > top:
            top = followers[word]
            best = word
    return best


def _pick_random(followers: dict[str, int], total: int, rng: random.Random) -> str | None:
    """Draw a follower weighted by count out of ``total``; None when the draw misses."""
    target = rng.randrange(total)
    running = 0
    for word in sorted(followers):
        running += followers[word]
        if running > target:
            return word
    return None


class WordModel:
    """Counts of words, word pairs and word triples from loaded sample text."""

    def __init__(self) -> None:
        self.window = 0
        self.unigrams: Counter[str] = Counter()
        self.bigrams: dict[str, Counter[str]] = {}
        self.trigrams: dict[str, dict[str, Counter[str]]] = {}

    def load(self, text: str, window: int, parse_method: str) -> list[str]:
        """Add the text's counts for a window of 2 or 3 words.

        With ``parsing_of_punctuation`` nothing is counted and the text's
        whitespace-separated tokens are returned to be echoed.
        """
        if window < 2:
            raise ValueError(f"window size must be >= 2: {window}")
        if window > 3:
            raise ValueError(f"window size must be 2 or 3: {window}")
        if parse_method not in PARSE_METHODS:
            raise ValueError(f"unknown parse method: {parse_method}")
        self.window = window
        if parse_method == "parsing_of_punctuation":
            return text.split()
        previous = before_previous = ""
        for word in tokenize(text):
            if word == QUOTE:
                continue
            if previous:
                self.bigrams.setdefault(previous, Counter())[word] += 1
            if window == 3 and before_previous:
                pairs = self.trigrams.setdefault(before_previous, {})
                pairs.setdefault(previous, Counter())[word] += 1
            self.unigrams[word] += 1
            before_previous, previous = previous, word
        return []

    def _followers(self, word: str) -> dict[str, int]:
        return self.bigrams.get(word, {})

    def _followers3(self, first: str, second: str) -> dict[str, int]:
        return self.trigrams.get(first, {}).get(second, {})

    def phrase_report(self, words: Sequence[str]) -> list[str]:
        """The count of a one- or two-word phrase and of each word that follows it."""
        if len(words) == 1:
            (word,) = words
            lines = [f"{word} ({self.unigrams[word]})"]
            followers = self._followers(word)
            lines.extend(f"{word} {nxt} ({followers[nxt]})" for nxt in sorted(followers))
            return lines
        if len(words) == 2:
            first, second = words
            count = self._followers(first).get(second, 0)
            lines = [f"{first} {second} ({count})"]
            followers = self._followers3(first, second)
            lines.extend(
                f"{first} {second} {nxt} ({followers[nxt]})" for nxt in sorted(followers)
            )
            return lines
        raise ValueError("a phrase report takes one or two words")

    @staticmethod
    def _first(words: Sequence[str]) -> str:
        if not words:
            raise ValueError("a phrase needs at least one word")
        return words[0]

    def _chain3(self, first: str, second: str, length: int) -> list[str]:
        out = []
        for _ in range(length):
            third = _pick_most(self._followers3(first, second))
            out.append(third)
            first, second = second, third
        return out

    def _most_common_parts(self, words: Sequence[str], length: int) -> tuple[list[str], list[str]]:
        first = self._first(words)
        if self.window == 2:
            tail = []
            current = first
            for _ in range(length):
                current = _pick_most(self._followers(current))
                tail.append(current)
            return [first], tail
        if self.window == 3:
            if len(words) == 1:
                second = _pick_most(self._followers(first))
                return [first, second], self._chain3(first, second, length - 1)
            if len(words) == 2:
                return [first, words[1]], self._chain3(first, words[1], length)
        return [first], []

    def most_common(self, words: Sequence[str], length: int) -> list[str]:
        """Extend a phrase by always taking the most frequent next word.

        With a window of 2 only the first word is used as the start. With a
        window of 3 a one-word start gains ``length`` words in all, a
        two-word start gains ``length`` words after both.
        """
        lead, tail = self._most_common_parts(words, length)
        return lead + tail

    def _random_chain(self, word: str, length: int, rng: random.Random) -> tuple[str, list[str]]:
        picked = []
        for _ in range(length):
            total = self.unigrams[word]
            if total == 0:
                raise ValueError(f"no counts for word: {word}")
            choice = _pick_random(self._followers(word), total, rng)
            if choice is not None:
                word = choice
                picked.append(choice)
        return word, picked

    def _random_chain3(
        self, first: str, second: str, length: int, rng: random.Random
    ) -> list[str]:
        picked = []
        for _ in range(length):
            total = self._followers(first).get(second, 0)
            if total == 0:
                raise ValueError(f"no counts for phrase: {first} {second}")
            choice = _pick_random(self._followers3(first, second), total, rng)
            if choice is not None:
                first, second = second, choice
                picked.append(choice)
        return picked

    def _random_parts(
        self, words: Sequence[str], length: int, rng: random.Random
    ) -> tuple[list[str], list[str]]:
        first = self._first(words)
        if self.window == 2:
            _, tail = self._random_chain(first, length, rng)
            return [first], tail
        if self.window == 3:
            if len(words) == 1:
                second, _ = self._random_chain(first, 1, rng)
                return [first], self._random_chain3(first, second, length - 1, rng)
            if len(words) == 2:
                return [first, words[1]], self._random_chain3(first, words[1], length - 1, rng)
        return [first], []

    def random_phrase(
        self, words: Sequence[str], length: int, rng: random.Random
    ) -> list[str]:
        """Extend a phrase by drawing next words in proportion to their counts.

        A draw may miss when a word's followers count less than the word
        itself; nothing is added for that step. With a window of 3 and a
        one-word start the drawn second word is used as context only.
        """
        lead, tail = self._random_parts(words, length, rng)
        return lead + tail


def _format_phrase(lead: Sequence[str], tail: Sequence[str]) -> str:
    text = "".join(f"{word} " for word in lead)
    if tail:
        text += " ".join(tail) + "\n"
    return text + "\n"


def _require(reader: _Reader, command: str) -> str:
    token = reader.token()
    if token is None:
        raise ValueError(f"missing argument for {command}")
    return token


def run_session(script: str, rng: random.Random | None = None) -> str:
    """Run load, print, generate and quit commands and return what they report."""
    rng = rng or random.Random()
    model = WordModel()
    out: list[str] = []
    reader = _Reader(script)
    while (command := reader.token()) is not None:
        if command == "load":
            filename = _require(reader, command)
            window = int(_require(reader, command))
            method = _require(reader, command)
            out.append(
                f"Loaded {filename} with window = {window} and parse method = {method}\n\n"
            )
            model.window = window
            if window < 2:
                print(f"ERROR window size must be >= 2:{window}", file=sys.stderr)
                continue
            if window > 3:
                continue
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
            out.extend(f"{token}\n" for token in model.load(text, window, method))
        elif command == "print":
            words = quoted_words(_words(reader))
            if len(words) in (1, 2):
                out.extend(f"{line}\n" for line in model.phrase_report(words))
                out.append("\n")
        elif command == "generate":
            words = quoted_words(_words(reader))
            length = int(_require(reader, command))
            method = _require(reader, command)
            if method == "random":
                lead, tail = model._random_parts(words, length, rng)
            elif method == "most_common":
                lead, tail = model._most_common_parts(words, length)
            else:
                raise ValueError(f"unknown selection method: {method}")
            out.append(_format_phrase(lead, tail))
        elif command == "quit":
            break
        else:
            out.append(f"WARNING: Unknown command: {command}\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: read commands from a file argument or standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("Usage: wordfreq [command_file]", file=sys.stderr)
        return 1
    try:
        if args:
            with open(args[0], encoding="utf-8") as handle:
                script = handle.read()
        else:
            script = sys.stdin.read()
        sys.stdout.write(run_session(script))
    except OSError as error:
        print(f"ERROR cannot open file: {error.filename}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"ERROR {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())