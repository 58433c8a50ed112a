from __future__ import annotations

from typing import Any, Dict, List

from fdclosure.errors import FDFormatError
from fdclosure.schema.fd import FDSet, FunctionalDependency, attribute_set


def fdset_from_json(data: Any) -> FDSet:
    """Đọc FDSet từ dữ liệu JSON đã giải mã.

    Chấp nhận mảng [{"lhs": [...], "rhs": [...]}, ...] hoặc object có khóa "fds".
    """

    if isinstance(data, dict):
        if "fds" not in data:
            raise FDFormatError("Thiếu khóa 'fds' trong object JSON")
        data = data["fds"]
    if not isinstance(data, list):
        raise FDFormatError("Danh sách phụ thuộc hàm phải là một mảng JSON")

    fdset = FDSet()
    for idx, item in enumerate(data):
        fdset.add(fd_from_json(item, idx))
    return fdset


def fd_from_json(item: Any, idx: int = 0) -> FunctionalDependency:
    """Đọc một phụ thuộc hàm {"lhs": [...], "rhs": [...]}."""

    if not isinstance(item, dict):
        raise FDFormatError(f"Phụ thuộc hàm #{idx} phải là object JSON")
    try:
        lhs = item["lhs"]
        rhs = item["rhs"]
    except KeyError as exc:
        raise FDFormatError(f"Phụ thuộc hàm #{idx} thiếu khóa {exc.args[0]!r}") from exc
    return FunctionalDependency(_names(lhs, idx, "lhs"), _names(rhs, idx, "rhs"))


def fdset_to_json(fdset: FDSet) -> List[Dict[str, List[str]]]:
    """Xuất FDSet thành mảng JSON có thứ tự xác định."""

    rows = [fd_to_json(dependency) for dependency in fdset]
    rows.sort(key=lambda row: (len(row["lhs"]), row["lhs"], len(row["rhs"]), row["rhs"]))
    return rows


def fd_to_json(dependency: FunctionalDependency) -> Dict[str, List[str]]:
    return {"lhs": sorted(dependency.determinant), "rhs": sorted(dependency.dependent)}


def _names(value: Any, idx: int, side: str):
    if not isinstance(value, list):
        raise FDFormatError(f"Vế {side} của phụ thuộc hàm #{idx} phải là mảng tên thuộc tính")
    try:
        return attribute_set(value)
    except TypeError as exc:
        raise FDFormatError(f"Vế {side} của phụ thuộc hàm #{idx}: {exc}") from exc
