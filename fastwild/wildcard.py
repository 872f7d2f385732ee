"""Wildcard pattern matching with '?' and '*' markers."""

from typing import Generic, Optional, Sequence, TypeVar, Union

from .symbols import BytesLike, fold_case, to_scalars, to_units


T = TypeVar("T")


class WildcardMatcher(Generic[T]):
    """Matches whole subject sequences against wildcard patterns.

    Works on any indexable sequence whose items compare by value with the
    two marker symbols: ``str`` (one item per code point) with ``"?"`` and
    ``"*"``, or ``bytes`` (one item per storage unit) with ``ord("?")`` and
    ``ord("*")``.

    Only pattern symbols are ever treated as markers. A subject symbol equal
    to a marker value is an ordinary literal.

    Matching keeps a single fallback point, the pattern position just past
    the latest run of multi-wildcards and the subject position where the
    symbols after it were last tried. A mismatch moves that subject
    position one step on instead of recursing, so ``*a*a*a...`` against
    ``aaaa...`` stays linear in memory and never explodes.
    """

    def __init__(self, single_wildcard: T, multi_wildcard: T):
        if single_wildcard == multi_wildcard:
            raise ValueError("Single and multi wildcard markers must differ")
        self.single_wildcard = single_wildcard
        self.multi_wildcard = multi_wildcard

    def match(self, pattern: Sequence[T], subject: Sequence[T]) -> bool:
        """Return True if the whole subject conforms to the pattern."""
        single = self.single_wildcard
        multi = self.multi_wildcard
        wild_len = len(pattern)
        tame_len = len(subject)
        wild = 0

        # Walk both sequences in step until the first '*'.
        while True:
            if wild >= tame_len:
                # Subject used up: only a run of '*' may remain.
                while wild < wild_len and pattern[wild] == multi:
                    wild += 1
                return wild >= wild_len
            if wild >= wild_len:
                return False
            symbol = pattern[wild]
            if symbol == multi:
                break
            if symbol != single and symbol != subject[wild]:
                return False
            wild += 1

        tame = wild
        wild = self._skip_run(pattern, wild)
        if wild >= wild_len:
            return True
        tame = self._seek(pattern[wild], subject, tame)
        if tame is None:
            return False
        wild_checkpoint, tame_checkpoint = wild, tame

        # Match the rest, falling back to the checkpoint on each mismatch.
        while True:
            if wild < wild_len and pattern[wild] == multi:
                wild = self._skip_run(pattern, wild)
                if wild >= wild_len:
                    return True
                if tame >= tame_len:
                    return False
                tame = self._seek(pattern[wild], subject, tame)
                if tame is None:
                    return False
                wild_checkpoint, tame_checkpoint = wild, tame
            else:
                if tame >= tame_len:
                    return wild >= wild_len
                if wild >= wild_len or (
                        pattern[wild] != single and pattern[wild] != subject[tame]):
                    # '?' right after the checkpoint matches anything, so
                    # move it behind the '*' and retry from the next literal.
                    while wild_checkpoint < wild_len and pattern[wild_checkpoint] == single:
                        wild_checkpoint += 1
                        tame_checkpoint += 1
                    wild = wild_checkpoint

                    while True:
                        tame_checkpoint += 1
                        if tame_checkpoint >= tame_len:
                            return wild >= wild_len
                        if wild < wild_len and pattern[wild] == subject[tame_checkpoint]:
                            break

                    tame = tame_checkpoint

            if tame >= tame_len:
                return wild >= wild_len

            wild += 1
            tame += 1

    def _skip_run(self, pattern: Sequence[T], position: int) -> int:
        """Return the first position at or after a run of multi-wildcards that is not one."""
        while position < len(pattern) and pattern[position] == self.multi_wildcard:
            position += 1
        return position

    def _seek(self, symbol: T, subject: Sequence[T], start: int) -> Optional[int]:
        """Find the first subject position from start where symbol can match."""
        if symbol == self.single_wildcard:
            return start
        for position in range(start, len(subject)):
            if subject[position] == symbol:
                return position
        return None

    def collapse_runs(self, pattern: Sequence[T]) -> Sequence[T]:
        """Return the pattern with every run of multi-wildcards reduced to one.

        The result has the same sequence type as the input for ``str``,
        ``bytes`` and ``list`` patterns.
        """
        kept = []
        previous_multi = False
        for index in range(len(pattern)):
            symbol = pattern[index:index + 1] if isinstance(pattern, (str, bytes, bytearray)) else pattern[index]
            is_multi = pattern[index] == self.multi_wildcard
            if is_multi and previous_multi:
                continue
            previous_multi = is_multi
            kept.append(symbol)

        if isinstance(pattern, str):
            return "".join(kept)
        if isinstance(pattern, (bytes, bytearray)):
            return type(pattern)(b"".join(kept))
        return type(pattern)(kept) if isinstance(pattern, (list, tuple)) else kept

    def has_wildcards(self, pattern: Sequence[T]) -> bool:
        """Check whether the pattern contains any marker symbol."""
        return any(
            pattern[index] == self.single_wildcard or pattern[index] == self.multi_wildcard
            for index in range(len(pattern))
        )


SINGLE_UNIT: WildcardMatcher[int] = WildcardMatcher(ord("?"), ord("*"))
SCALAR: WildcardMatcher[str] = WildcardMatcher("?", "*")


def match_single_unit(pattern: Union[str, BytesLike], subject: Union[str, BytesLike]) -> bool:
    """Match storage unit by storage unit. Text is encoded to UTF-8 first."""
    return SINGLE_UNIT.match(to_units(pattern), to_units(subject))


def match_scalar(pattern: Union[str, BytesLike], subject: Union[str, BytesLike]) -> bool:
    """Match code point by code point. Bytes are decoded as UTF-8 first."""
    return SCALAR.match(to_scalars(pattern), to_scalars(subject))


def match_case_insensitive(pattern: Union[str, BytesLike], subject: Union[str, BytesLike]) -> bool:
    """Fold both sides with the same casing rule, then match code points."""
    return SCALAR.match(fold_case(to_scalars(pattern)), fold_case(to_scalars(subject)))
