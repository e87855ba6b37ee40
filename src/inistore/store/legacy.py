# -*- encoding: utf-8 -*-
# @File   : legacy.py
# @Time   : 2026/10/19 23:10:41
# @Author : Kariko Lin

"""One store for the whole process, with integer result codes.

For callers of the old shared-library style API, where there is a single
loaded INI and every call answers `0` on success:

    ```python
    load_resource('app.ini')       # 0
    get_value('db.host')           # (0, 'localhost')
    get_value('db.missing')        # (3, None)
    ```

New code should hold its own `ConfigStore` instead.
"""

from .config import ConfigStore
from .consts import StoreStatus
from .errors import StoreError

_default = ConfigStore()


def default_store() -> ConfigStore:
    return _default


def reset() -> None:
    """Drop the process-wide store and start over unloaded."""
    global _default
    _default = ConfigStore()


def load_resource(path: str) -> int:
    try:
        return _default.load(path).value
    except StoreError as e:
        return e.status.value


def get_value(identifier: str) -> tuple[int, str | None]:
    try:
        return StoreStatus.OK.value, _default.get(identifier)
    except StoreError as e:
        return e.status.value, None


def set_value(identifier: str, value: str) -> int:
    try:
        return _default.set(identifier, value).value
    except StoreError as e:
        return e.status.value


def delete_value(identifier: str) -> int:
    try:
        return _default.delete(identifier).value
    except StoreError as e:
        return e.status.value


def dump_values() -> int:
    try:
        return _default.dump().value
    except StoreError as e:
        return e.status.value
