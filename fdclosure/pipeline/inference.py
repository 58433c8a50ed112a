from __future__ import annotations

from itertools import combinations
from typing import List, Optional, Set

from fdclosure.pipeline.armstrong import check_attribute_limit
from fdclosure.schema.fd import AttributeSet, FDSet, FunctionalDependency, Names, attribute_set


def attribute_closure(attrs: Names, fdset: FDSet) -> AttributeSet:
    """Tính X⁺: mọi thuộc tính được X xác định theo tập phụ thuộc hàm."""

    closure: Set[str] = set(attribute_set(attrs))
    changed = True
    while changed:
        changed = False
        for dependency in fdset:
            if dependency.determinant <= closure and not dependency.dependent <= closure:
                closure |= dependency.dependent
                changed = True
    return frozenset(closure)


def implies(fdset: FDSet, dependency: FunctionalDependency) -> bool:
    """fdset ⊨ X → Y khi và chỉ khi Y ⊆ X⁺."""

    return dependency.dependent <= attribute_closure(dependency.determinant, fdset)


def redundant_fds(fdset: FDSet) -> FDSet:
    """Các phụ thuộc hàm suy ra được từ phần còn lại của tập."""

    out = FDSet()
    for dependency in fdset:
        rest = FDSet(other for other in fdset if other != dependency)
        if implies(rest, dependency):
            out.add(dependency)
    return out


def equivalent(first: FDSet, second: FDSet) -> bool:
    """Hai tập tương đương khi mỗi tập suy ra mọi phụ thuộc hàm của tập kia."""

    return all(implies(first, dependency) for dependency in second) and all(
        implies(second, dependency) for dependency in first
    )


def is_superkey(attrs: Names, fdset: FDSet, schema: Optional[Names] = None) -> bool:
    """attrs là siêu khóa nếu bao đóng của nó phủ toàn bộ lược đồ.

    Khi không truyền schema, lược đồ là mọi thuộc tính xuất hiện trong fdset và attrs.
    """

    key = attribute_set(attrs)
    relation = fdset.attributes() | key if schema is None else attribute_set(schema)
    return relation <= attribute_closure(key, fdset)


def candidate_keys(schema: Names, fdset: FDSet, max_attributes: Optional[int] = None) -> List[AttributeSet]:
    """Liệt kê mọi khóa ứng viên (siêu khóa tối tiểu), khóa nhỏ trước."""

    relation = attribute_set(schema)
    check_attribute_limit(relation, max_attributes)

    keys: List[AttributeSet] = []
    ordered = sorted(relation)
    for size in range(len(ordered) + 1):
        for combo in combinations(ordered, size):
            candidate = frozenset(combo)
            # Bỏ qua siêu tập của khóa đã tìm được
            if any(key <= candidate for key in keys):
                continue
            if relation <= attribute_closure(candidate, fdset):
                keys.append(candidate)
    return keys
