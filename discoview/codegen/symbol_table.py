"""Collision-free identifier allocation within one scope.

A SymbolTable is seeded with the reserved words of the target surface and
then hands out names in call order. Because every result depends on what
was allocated before, callers must invoke ``allocate`` in a fixed,
reproducible order.
"""

from collections.abc import Iterable

__all__ = ['SymbolTable']


class SymbolTable:
    """Allocates unique names within a single scope.

    ``allocate`` returns the candidate unchanged when it is free. A candidate
    that is reserved or already allocated gets a numeric suffix, starting at
    ``2`` and counting upward until the result is free. Names are compared
    exactly, so ``Foo`` and ``foo`` are distinct symbols.

    Example:
        >>> table = SymbolTable({'class'})
        >>> table.allocate('zone')
        'zone'
        >>> table.allocate('zone')
        'zone2'
        >>> table.allocate('class')
        'class2'
    """

    def __init__(self, reserved: Iterable[str] = ()):
        """Initialize the table.

        Args:
            reserved: Words that must never be returned as-is. The set is
                copied, so later changes to the argument have no effect.
        """
        self._reserved: frozenset[str] = frozenset(reserved)
        self._allocated: set[str] = set()

    def allocate(self, candidate: str) -> str:
        """Allocate ``candidate`` or the first free suffixed variant of it.

        Args:
            candidate: The preferred name.

        Returns:
            A name never returned before by this table and not reserved.
        """
        name = candidate
        suffix = 2
        while self._is_taken(name):
            name = f'{candidate}{suffix}'
            suffix += 1
        self._allocated.add(name)
        return name

    def _is_taken(self, name: str) -> bool:
        return name in self._reserved or name in self._allocated

    def __contains__(self, name: str) -> bool:
        return name in self._allocated

    def __len__(self) -> int:
        return len(self._allocated)
