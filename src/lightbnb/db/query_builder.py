"""Property search query builder.

Turns a :class:`~lightbnb.filters.PropertyFilter` and a row cap into a
parameterised ``SELECT`` over properties joined with their reviews. Active
criteria become :class:`Predicate` entries, which are rendered in a fixed
order behind a single ``WHERE`` and chained with ``AND``. Placeholders are
positional and 1-based: placeholder ``N`` binds ``params[N - 1]``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Literal, NamedTuple

from lightbnb.filters import PropertyFilter

DEFAULT_RESULT_LIMIT: Final = 10

Placeholder = Literal["$", "?"]

_BASE_QUERY: Final = """\
SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_id"""


@dataclass(frozen=True)
class Predicate:
    """One active filter: ``<column> <operator> <placeholder>``."""

    column: str
    operator: str
    value: Any


class PropertyQuery(NamedTuple):
    """SQL text plus the positional parameters it references."""

    sql: str
    params: list[Any]


def collect_predicates(filters: PropertyFilter) -> list[Predicate]:
    """Build predicates for the active criteria.

    Order is fixed: city, owner, minimum price, maximum price, minimum rating.
    """
    predicates: list[Predicate] = []
    if filters.city is not None:
        predicates.append(Predicate("city", "LIKE", f"%{filters.city}%"))
    if filters.owner_id is not None:
        predicates.append(Predicate("owner_id", "=", filters.owner_id))
    if filters.minimum_price_per_night is not None:
        predicates.append(Predicate("cost_per_night", ">=", filters.minimum_price_per_night))
    if filters.maximum_price_per_night is not None:
        predicates.append(Predicate("cost_per_night", "<=", filters.maximum_price_per_night))
    if filters.minimum_rating is not None:
        predicates.append(Predicate("rating", ">=", filters.minimum_rating))
    return predicates


def render_predicates(
    predicates: list[Predicate],
    params: list[Any],
    placeholder: Placeholder = "$",
) -> list[str]:
    """Render predicates as ``WHERE``/``AND`` lines, appending their values to ``params``.

    Args:
        predicates: Predicates in emission order.
        params: Parameter list to extend; may already hold earlier values.
        placeholder: ``"$"`` for ``$N`` or ``"?"`` for SQLite's ``?N``.

    Returns:
        One SQL line per predicate.
    """
    lines: list[str] = []
    where_emitted = False
    for predicate in predicates:
        params.append(predicate.value)
        connective = "AND" if where_emitted else "WHERE"
        where_emitted = True
        lines.append(
            f"{connective} {predicate.column} {predicate.operator} {placeholder}{len(params)}"
        )
    return lines


def build_property_query(
    filters: PropertyFilter | Mapping[str, Any] | None = None,
    limit: int | None = None,
    *,
    placeholder: Placeholder = "$",
) -> PropertyQuery:
    """Build the property search query.

    Args:
        filters: Search criteria. A plain mapping is validated into a
            PropertyFilter; None means no criteria.
        limit: Maximum rows to return. None means DEFAULT_RESULT_LIMIT.
            Zero or negative values are passed through unchanged.
        placeholder: Positional placeholder style.

    Returns:
        PropertyQuery whose params end with the limit.
    """
    if filters is None:
        filters = PropertyFilter()
    elif not isinstance(filters, PropertyFilter):
        filters = PropertyFilter.model_validate(dict(filters))
    if limit is None:
        limit = DEFAULT_RESULT_LIMIT

    params: list[Any] = []
    lines = [_BASE_QUERY, *render_predicates(collect_predicates(filters), params, placeholder)]

    params.append(limit)
    lines.extend(
        [
            "GROUP BY properties.id",
            "ORDER BY cost_per_night",
            f"LIMIT {placeholder}{len(params)};",
        ]
    )
    return PropertyQuery("\n".join(lines), params)
