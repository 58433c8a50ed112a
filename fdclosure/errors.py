from __future__ import annotations


class FDClosureError(Exception):
    """Lỗi gốc của thư viện."""


class AttributeLimitError(FDClosureError):
    """Tập thuộc tính vượt quá giới hạn cho phép khi tính bao đóng."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"Tập thuộc tính có {count} phần tử, vượt giới hạn {limit} "
            "(số tập con tăng theo 2^n)"
        )
        self.count = count
        self.limit = limit


class FDFormatError(FDClosureError, ValueError):
    """Dữ liệu JSON mô tả phụ thuộc hàm không hợp lệ."""
