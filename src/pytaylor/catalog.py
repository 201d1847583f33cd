"""Ordered, read-only registry of :class:`SmoothFunction` examples."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from pytaylor.functions import PARABOLOID, SADDLE, SINE_WAVE, SmoothFunction


class FunctionCatalog:
    """Fixed, ordered collection of smooth functions.

    Parameters
    ----------
    functions : iterable of SmoothFunction
        Catalog entries, in display order. Identifiers must be unique.

    Examples
    --------
    >>> from pytaylor import CATALOG
    >>> CATALOG.default().id
    'paraboloid'
    >>> CATALOG.ids()
    ['paraboloid', 'saddle', 'sine_wave']
    """

    def __init__(self, functions: Iterable[SmoothFunction]):
        functions = tuple(functions)
        if not functions:
            raise ValueError("A catalog needs at least one function.")

        seen = set()
        for func in functions:
            if not isinstance(func, SmoothFunction):
                raise TypeError(
                    f"Catalog entries must be SmoothFunction, got {type(func).__name__}"
                )
            if func.id in seen:
                raise ValueError(f"Duplicate function id {func.id!r}")
            seen.add(func.id)

        self._functions = functions
        self._by_id = {func.id: func for func in functions}

    def list(self) -> List[SmoothFunction]:
        """Return the catalog entries in order (a fresh list)."""
        return list(self._functions)

    def default(self) -> SmoothFunction:
        """Return the first entry."""
        return self._functions[0]

    def get(self, function_id: str) -> SmoothFunction:
        """Look up an entry by identifier.

        Raises
        ------
        KeyError
            If no entry has that identifier.
        """
        try:
            return self._by_id[function_id]
        except KeyError:
            raise KeyError(
                f"Unknown function id {function_id!r}; "
                f"available: {', '.join(self.ids())}"
            ) from None

    def ids(self) -> List[str]:
        return [func.id for func in self._functions]

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[SmoothFunction]:
        return iter(self._functions)

    def __contains__(self, item) -> bool:
        if isinstance(item, SmoothFunction):
            return self._by_id.get(item.id) is item
        return item in self._by_id

    def __repr__(self) -> str:
        return f"FunctionCatalog(ids={self.ids()})"


CATALOG = FunctionCatalog([PARABOLOID, SADDLE, SINE_WAVE])
