from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional

import ujson

from fdclosure.errors import AttributeLimitError, FDFormatError
from fdclosure.logger import LOGGER, configure_logging
from fdclosure.pipeline.armstrong import augment, closure, transitive, trivial
from fdclosure.pipeline.inference import candidate_keys, redundant_fds
from fdclosure.schema.fd import FDSet
from fdclosure.schema.fd_json import fdset_from_json, fdset_to_json

OPERATIONS = ("closure", "trivial", "transitive", "augment", "keys", "redundant")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Tính bao đóng tập phụ thuộc hàm theo tiên đề Armstrong")
    parser.add_argument("--fds", required=True, help="File JSON chứa danh sách phụ thuộc hàm")
    parser.add_argument("--op", choices=OPERATIONS, default="closure", help="Phép toán cần chạy")
    parser.add_argument("--attrs", default="", help="Thuộc tính dùng để tăng trưởng (ngăn cách bởi dấu phẩy)")
    parser.add_argument("--schema", default=None, help="Lược đồ quan hệ cho --op keys (mặc định: mọi thuộc tính)")
    parser.add_argument("--max-attributes", type=int, default=None, help="Giới hạn số thuộc tính (<= 0 để tắt)")
    parser.add_argument("--out", help="Ghi kết quả JSON ra file thay vì in ra màn hình")
    args = parser.parse_args(argv)
    configure_logging()

    try:
        fdset = _load_fds(Path(args.fds))
        result = _run(args, fdset)
    except (FDFormatError, AttributeLimitError) as exc:
        LOGGER.error(str(exc))
        print(f"Lỗi: {exc}", file=sys.stderr)
        return 1

    text = ujson.dumps(result, indent=2, ensure_ascii=False)
    if args.out:
        Path(args.out).write_text(text + "\n", encoding="utf-8")
        print(f"Đã ghi kết quả vào {args.out}")
    else:
        print(f"--- Kết quả ({args.op}) ---")
        print(text)
    return 0


def _run(args: argparse.Namespace, fdset: FDSet) -> Any:
    if args.op == "closure":
        return fdset_to_json(closure(fdset, max_attributes=args.max_attributes))
    if args.op == "trivial":
        return fdset_to_json(trivial(fdset))
    if args.op == "transitive":
        return fdset_to_json(transitive(fdset))
    if args.op == "augment":
        return fdset_to_json(augment(fdset, _split(args.attrs)))
    if args.op == "redundant":
        return fdset_to_json(redundant_fds(fdset))
    schema = _split(args.schema) if args.schema is not None else fdset.attributes()
    keys = candidate_keys(schema, fdset, max_attributes=args.max_attributes)
    return [sorted(key) for key in keys]


def _load_fds(path: Path) -> FDSet:
    try:
        data = ujson.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise FDFormatError(f"{path} không phải JSON hợp lệ: {exc}") from exc
    return fdset_from_json(data)


def _split(text: str) -> List[str]:
    return [name.strip() for name in text.split(",") if name.strip()]


if __name__ == "__main__":
    sys.exit(main())
