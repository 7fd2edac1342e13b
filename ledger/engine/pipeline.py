"""
Filter/sort pipeline.

Pure functions with no side effects: the input collection and specification
are never mutated and the same inputs always produce the same ordered view.
"""
import unicodedata
from typing import Callable, Iterable, Optional
from ledger.models.filters import ANY, FilterSpec, SortDirection, SortField
from ledger.models.transaction import Transaction


def apply_filters(transactions: Iterable[Transaction], spec: FilterSpec) -> list[Transaction]:
    """
    Produce the ordered view of ``transactions`` described by ``spec``.

    Filtering ANDs the type, status and search predicates. Sorting follows
    and is stable in both directions: records with equal keys keep their
    input order.
    """
    matching = [t for t in transactions if matches_filters(t, spec)]
    return sort_transactions(matching, spec.sort_by, spec.sort_direction)


def matches_filters(transaction: Transaction, spec: FilterSpec) -> bool:
    if spec.type != ANY and transaction.type != spec.type:
        return False
    if spec.status != ANY and transaction.status != spec.status:
        return False
    return matches_search(transaction, spec.search)


def matches_search(transaction: Transaction, search: str) -> bool:
    """Case-insensitive substring match on description, sender or recipient."""
    if not search:
        return True
    needle = search.casefold()
    return any(
        needle in field.casefold()
        for field in (transaction.description, transaction.sender, transaction.recipient)
        if field
    )


def sort_transactions(
    transactions: list[Transaction],
    sort_by: SortField,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[Transaction]:
    # sorted() is stable and keeps ties in input order even with reverse=True
    return sorted(
        transactions,
        key=_SORT_KEYS[sort_by],
        reverse=direction == SortDirection.DESCENDING,
    )


def collation_key(text: str) -> tuple[str, str, str]:
    """
    Locale-independent ordering for descriptions.

    Compares base letters first (ignoring accents and case), then accents,
    then case with lowercase ahead of uppercase. Punctuation and symbols
    keep their code point order, so characters above "z" (such as "~" or
    "{") sort after every letter, unlike ICU where they come first.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), text.swapcase()


def count_active_filters(spec: Optional[FilterSpec]) -> int:
    """Number of narrowing criteria in effect; sorting does not count."""
    if spec is None:
        return 0
    return sum((bool(spec.search), spec.type != ANY, spec.status != ANY))


_SORT_KEYS: dict[SortField, Callable[[Transaction], object]] = {
    SortField.DATE: lambda t: t.date.timestamp(),
    SortField.AMOUNT: lambda t: t.amount,
    SortField.DESCRIPTION: lambda t: collation_key(t.description),
}
