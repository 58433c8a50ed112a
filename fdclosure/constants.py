from __future__ import annotations

import os
import warnings


def env_int(name: str, default: int) -> int:
    """Đọc số nguyên từ biến môi trường; giá trị không hợp lệ thì dùng mặc định và cảnh báo."""

    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        warnings.warn(f"{name}={raw!r} không phải số nguyên, dùng mặc định {default}", RuntimeWarning)
        return default


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Giới hạn số thuộc tính cho phép tính bao đóng (thuật toán tăng theo hàm mũ)
DEFAULT_MAX_ATTRIBUTES = 6
MAX_ATTRIBUTES = env_int("FDCLOSURE_MAX_ATTRIBUTES", DEFAULT_MAX_ATTRIBUTES)

# Cảnh báo khi tập lũy thừa quá lớn
POWER_SET_WARN_SIZE = env_int("FDCLOSURE_POWER_SET_WARN", 16)

LOG_LEVEL = os.environ.get("FDCLOSURE_LOG_LEVEL", "WARNING").upper()

# Máy chủ HTTP (backend/app.py)
SERVER_HOST = os.environ.get("FDCLOSURE_HOST", "127.0.0.1")
SERVER_PORT = env_int("FDCLOSURE_PORT", 5000)
SERVER_DEBUG = env_flag("FDCLOSURE_DEBUG")
