from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Set, Union

AttributeSet = FrozenSet[str]

Names = Union[str, Iterable[str]]


def attribute_set(names: Names = ()) -> AttributeSet:
    """Tạo AttributeSet bất biến từ một tập tên thuộc tính.

    Một chuỗi đơn lẻ được hiểu là tên của đúng một thuộc tính (không tách ký tự).
    """

    if isinstance(names, str):
        names = (names,)
    attrs = frozenset(names)
    for name in attrs:
        if not isinstance(name, str):
            raise TypeError(f"Tên thuộc tính phải là chuỗi, nhận được {name!r}")
    return attrs


@dataclass(frozen=True, slots=True)
class FunctionalDependency:
    """Phụ thuộc hàm determinant → dependent, so sánh theo nội dung hai vế."""

    determinant: AttributeSet
    dependent: AttributeSet

    def __post_init__(self) -> None:
        object.__setattr__(self, "determinant", attribute_set(self.determinant))
        object.__setattr__(self, "dependent", attribute_set(self.dependent))

    def __str__(self) -> str:
        return f"{_render(self.determinant)} -> {_render(self.dependent)}"

    def copy(self) -> "FunctionalDependency":
        """Bản sao có cùng nội dung (tương đương copy constructor)."""

        return FunctionalDependency(self.determinant, self.dependent)

    def with_determinant(self, attrs: Names) -> "FunctionalDependency":
        """Phụ thuộc hàm mới với vế trái được bổ sung thêm attrs."""

        return FunctionalDependency(self.determinant | attribute_set(attrs), self.dependent)

    def with_dependent(self, attrs: Names) -> "FunctionalDependency":
        """Phụ thuộc hàm mới với vế phải được bổ sung thêm attrs."""

        return FunctionalDependency(self.determinant, self.dependent | attribute_set(attrs))

    def augmented(self, attrs: Names) -> "FunctionalDependency":
        """Tiên đề tăng trưởng: thêm attrs vào cả hai vế."""

        extra = attribute_set(attrs)
        return FunctionalDependency(self.determinant | extra, self.dependent | extra)

    def is_trivial(self) -> bool:
        return self.dependent <= self.determinant

    def attributes(self) -> AttributeSet:
        return self.determinant | self.dependent


def fd(determinant: Names, dependent: Names) -> FunctionalDependency:
    """Viết tắt để tạo phụ thuộc hàm từ danh sách tên thuộc tính."""

    return FunctionalDependency(attribute_set(determinant), attribute_set(dependent))


@dataclass(slots=True)
class FDSet:
    """Tập phụ thuộc hàm, loại trùng theo nội dung.

    FDSet(other) tạo một bản sao độc lập; tập chỉ tăng, không bao giờ bị xóa phần tử.
    """

    fds: Set[FunctionalDependency] = field(default_factory=set)

    def __post_init__(self) -> None:
        fds = set(self.fds)
        for item in fds:
            if not isinstance(item, FunctionalDependency):
                raise TypeError(f"FDSet chỉ chứa FunctionalDependency, nhận được {item!r}")
        self.fds = fds

    def __iter__(self) -> Iterator[FunctionalDependency]:
        return iter(self.fds)

    def __len__(self) -> int:
        return len(self.fds)

    def __contains__(self, item: object) -> bool:
        return item in self.fds

    def add(self, dependency: FunctionalDependency) -> bool:
        """Thêm một phụ thuộc hàm, trả về False nếu đã có phần tử bằng nó."""

        if not isinstance(dependency, FunctionalDependency):
            raise TypeError(f"FDSet chỉ chứa FunctionalDependency, nhận được {dependency!r}")
        if dependency in self.fds:
            return False
        self.fds.add(dependency)
        return True

    def update(self, dependencies: Iterable[FunctionalDependency]) -> bool:
        """Thêm nhiều phụ thuộc hàm, trả về True nếu có ít nhất một phần tử mới."""

        changed = False
        for dependency in dependencies:
            changed |= self.add(dependency)
        return changed

    def copy(self) -> "FDSet":
        return FDSet(self.fds)

    def as_set(self) -> FrozenSet[FunctionalDependency]:
        """Ảnh chụp bất biến của tập bên dưới."""

        return frozenset(self.fds)

    def attributes(self) -> AttributeSet:
        """Hợp của mọi thuộc tính xuất hiện ở cả hai vế."""

        out: Set[str] = set()
        for dependency in self.fds:
            out |= dependency.determinant
            out |= dependency.dependent
        return frozenset(out)


def _render(attrs: AttributeSet) -> str:
    return ",".join(sorted(attrs)) if attrs else "∅"
