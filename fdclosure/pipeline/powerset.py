from __future__ import annotations

from typing import FrozenSet, Hashable, Iterable, Set, TypeVar

from fdclosure.constants import POWER_SET_WARN_SIZE
from fdclosure.logger import LOGGER

E = TypeVar("E", bound=Hashable)


def power_set(elements: Iterable[E]) -> Set[FrozenSet[E]]:
    """Sinh mọi tập con của một tập hữu hạn, gồm cả tập rỗng và chính nó.

    Làm việc trên bản chụp frozenset của đầu vào nên không bao giờ sửa tập của
    người gọi. Mỗi phần tử e nhân đôi kết quả: P(S) = P(S∖{e}) ∪ {T ∪ {e}}.
    """

    snapshot = frozenset(elements)
    if len(snapshot) > POWER_SET_WARN_SIZE:
        LOGGER.warning(f"Sinh tập lũy thừa cho {len(snapshot)} phần tử ({2 ** len(snapshot)} tập con)")

    subsets: Set[FrozenSet[E]] = {frozenset()}
    for element in snapshot:
        subsets |= {subset | {element} for subset in subsets}
    return subsets


def non_empty_subsets(elements: Iterable[E]) -> Set[FrozenSet[E]]:
    return {subset for subset in power_set(elements) if subset}
