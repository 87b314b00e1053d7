"""Polynomials as ordered lists of terms, with term-wise addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Term", "Polynomial"]


@dataclass(frozen=True)
class Term:
    """One term ``coef * x ** exp``."""

    coef: int
    exp: int

    def __str__(self) -> str:
        return f"{self.coef}x^{self.exp}"


class Polynomial:
    """A sequence of terms, expected in descending order of exponent."""

    def __init__(self, terms: Iterable[Term | tuple[int, int]] = ()) -> None:
        self._terms = tuple(
            term if isinstance(term, Term) else Term(*term) for term in terms
        )

    def __add__(self, other: object) -> Polynomial:
        """Merge two polynomials; terms of equal exponent have their
        coefficients added, even when the sum is zero."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        first, second = self._terms, other._terms
        merged: list[Term] = []
        i = j = 0
        while i < len(first) and j < len(second):
            a, b = first[i], second[j]
            if a.exp > b.exp:
                merged.append(a)
                i += 1
            elif a.exp < b.exp:
                merged.append(b)
                j += 1
            else:
                merged.append(Term(a.coef + b.coef, a.exp))
                i += 1
                j += 1
        merged.extend(first[i:])
        merged.extend(second[j:])
        return Polynomial(merged)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        return "+".join(str(term) for term in self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __repr__(self) -> str:
        pairs = [(term.coef, term.exp) for term in self._terms]
        return f"{type(self).__name__}({pairs!r})"