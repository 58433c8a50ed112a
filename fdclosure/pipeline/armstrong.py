from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional

from fdclosure import constants
from fdclosure.errors import AttributeLimitError
from fdclosure.logger import LOGGER
from fdclosure.pipeline.powerset import non_empty_subsets, power_set
from fdclosure.schema.fd import AttributeSet, FDSet, FunctionalDependency, Names, attribute_set


def trivial(fdset: FDSet) -> FDSet:
    """Tiên đề phản xạ: X → Z với mọi tập con khác rỗng Z của X.

    Chỉ dùng vế trái của từng phụ thuộc hàm, vế phải bị bỏ qua.
    """

    out = FDSet()
    for dependency in fdset:
        for subset in non_empty_subsets(dependency.determinant):
            out.add(FunctionalDependency(dependency.determinant, subset))
    return out


def augment(fdset: FDSet, attrs: Names) -> FDSet:
    """Tiên đề tăng trưởng: X → Y thành X ∪ attrs → Y ∪ attrs."""

    extra = attribute_set(attrs)
    out = FDSet()
    for dependency in fdset:
        out.add(dependency.augmented(extra))
    return out


def transitive(fdset: FDSet) -> FDSet:
    """Tiên đề bắc cầu áp dụng đến điểm bất động.

    Với A → B và C → D mà C ⊆ B (A xác định mọi thuộc tính của C) thì suy ra
    A → D. Mỗi vòng quét mọi cặp có thứ tự trên ảnh chụp của tập đang làm việc;
    dừng khi một vòng không sinh thêm gì.
    Chỉ trả về các phụ thuộc hàm mới, không gồm đầu vào.
    """

    working = FDSet(fdset)
    derived = FDSet()
    changed = True
    passes = 0
    while changed:
        changed = False
        passes += 1
        snapshot = list(working)
        by_determinant = _group_by_determinant(snapshot)
        for first in snapshot:
            for determinant, dependents in by_determinant.items():
                if not determinant <= first.dependent:
                    continue
                for dependent in dependents:
                    candidate = FunctionalDependency(first.determinant, dependent)
                    if working.add(candidate):
                        derived.add(candidate)
                        changed = True
    LOGGER.debug(f"transitive: {len(derived)} phụ thuộc hàm mới sau {passes} vòng")
    return derived


def all_attributes(fdset: FDSet) -> AttributeSet:
    """Vũ trụ thuộc tính: hợp của mọi vế trái và vế phải."""

    return fdset.attributes()


def check_attribute_limit(attrs: AttributeSet, max_attributes: Optional[int] = None) -> None:
    """Ném AttributeLimitError khi số thuộc tính vượt giới hạn (giới hạn <= 0 là tắt kiểm tra)."""

    limit = constants.MAX_ATTRIBUTES if max_attributes is None else max_attributes
    if 0 < limit < len(attrs):
        raise AttributeLimitError(len(attrs), limit)


def closure(fdset: FDSet, max_attributes: Optional[int] = None) -> FDSet:
    """Bao đóng của tập phụ thuộc hàm theo các tiên đề Armstrong.

    Vũ trụ thuộc tính lấy từ đầu vào gốc và cố định suốt quá trình; mỗi vòng:
    - tăng trưởng đầu vào gốc với mọi tập con của vũ trụ,
    - thêm các phụ thuộc hàm tầm thường của tập đang làm việc,
    - thêm các phụ thuộc hàm bắc cầu của tập đang làm việc,
    cho đến khi một vòng không thêm được phụ thuộc hàm nào.
    """

    original = FDSet(fdset)
    universe = all_attributes(original)
    check_attribute_limit(universe, max_attributes)
    subsets = power_set(universe)

    working = FDSet(original)
    repeat = True
    passes = 0
    while repeat:
        repeat = False
        passes += 1
        for subset in subsets:
            repeat |= working.update(augment(original, subset))
        repeat |= working.update(trivial(working))
        repeat |= working.update(transitive(working))
        LOGGER.debug(f"closure: vòng {passes}, {len(working)} phụ thuộc hàm")
    return working


def _group_by_determinant(fds: List[FunctionalDependency]) -> Dict[AttributeSet, List[AttributeSet]]:
    groups: Dict[AttributeSet, List[AttributeSet]] = defaultdict(list)
    for dependency in fds:
        groups[dependency.determinant].append(dependency.dependent)
    return groups
