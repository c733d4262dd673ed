#!/usr/bin/env python3
"""
CVRP Chromosome Classes
Implements the flat sequence representation: customer ids with embedded route separators
"""

from typing import List, Optional, Union, Iterable, Dict, Any

from .common import SEPARATOR_DISPLAY_VALUE


class Separator:
    """Route boundary token inside a chromosome

    A single shared instance (``SEPARATOR``) exists. It is not an integer,
    so it can never be mistaken for a customer id.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Separator, ())

    def __repr__(self) -> str:
        return "SEPARATOR"

    def __str__(self) -> str:
        return "|"


SEPARATOR = Separator()

Token = Union[int, Separator]


def is_separator(token: Token) -> bool:
    """Whether a token is the route separator"""
    return isinstance(token, Separator)


class SequenceChromosome:
    """Represents a candidate CVRP solution as one flat token sequence (GA chromosome)"""

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        """Initialize sequence chromosome

        Args:
            tokens: Customer ids and SEPARATOR tokens in route order
        """
        self.tokens = list(tokens) if tokens else []

        # Cached evaluation results
        self.cost = None                   # Total cost of the decoded routes
        self.is_feasible = None            # Capacity and coverage check result
        self.routes = None                 # Decoded depot-rooted routes

        # Metadata
        self.creation_method = "unknown"   # How chromosome was created
        self.repairs_applied = []          # Names of repair operators applied

    @classmethod
    def from_values(cls, values: Iterable[int],
                    separator_value: int = SEPARATOR_DISPLAY_VALUE) -> 'SequenceChromosome':
        """Build a chromosome from plain integers, reading ``separator_value`` as a separator"""
        return cls(SEPARATOR if value == separator_value else value for value in values)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SequenceChromosome):
            return NotImplemented
        return self.tokens == other.tokens

    __hash__ = None

    def separator_count(self) -> int:
        """Number of separator tokens"""
        return sum(1 for token in self.tokens if is_separator(token))

    def get_customers(self) -> List[int]:
        """Customer tokens in order, separators dropped"""
        return [token for token in self.tokens if not is_separator(token)]

    def get_bins(self) -> List[List[int]]:
        """Customer groups between separators, empty groups included"""
        bins = [[]]
        for token in self.tokens:
            if is_separator(token):
                bins.append([])
            else:
                bins[-1].append(token)
        return bins

    def to_values(self, separator_value: int = SEPARATOR_DISPLAY_VALUE) -> List[int]:
        """Plain integer form, separators rendered as ``separator_value``"""
        return [separator_value if is_separator(token) else token for token in self.tokens]

    def invalidate(self) -> None:
        """Invalidate cached evaluation results"""
        self.cost = None
        self.is_feasible = None
        self.routes = None

    def with_tokens(self, tokens: Iterable[Token], repair_name: Optional[str] = None) -> 'SequenceChromosome':
        """New chromosome with the same metadata but different tokens"""
        new_chromosome = SequenceChromosome(tokens)
        new_chromosome.creation_method = self.creation_method
        new_chromosome.repairs_applied = self.repairs_applied.copy()
        if repair_name:
            new_chromosome.repairs_applied.append(repair_name)
        return new_chromosome

    def copy(self) -> 'SequenceChromosome':
        """Create a copy of the chromosome"""
        new_chromosome = self.with_tokens(self.tokens)
        new_chromosome.cost = self.cost
        new_chromosome.is_feasible = self.is_feasible
        new_chromosome.routes = [route.copy() for route in self.routes] if self.routes is not None else None
        return new_chromosome

    def get_stats(self) -> Dict[str, Any]:
        """Summary of the chromosome structure and evaluation"""
        bins = self.get_bins()
        return {
            'length': len(self.tokens),
            'customers': len(self.get_customers()),
            'separators': self.separator_count(),
            'empty_bins': sum(1 for group in bins if not group),
            'cost': self.cost,
            'is_feasible': self.is_feasible,
            'creation_method': self.creation_method
        }

    def __str__(self) -> str:
        body = " ".join(str(token) for token in self.tokens)
        cost = f"{self.cost:.2f}" if self.cost is not None else "n/a"
        return f"SequenceChromosome([{body}], cost={cost})"

    def __repr__(self) -> str:
        return f"SequenceChromosome(tokens={self.tokens!r})"
