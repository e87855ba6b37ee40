# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 21:09:40
# @Author : Kariko Lin

from .consts import StoreStatus


class StoreError(Exception):
    """Base of every failure raised by a `ConfigStore`."""
    status = StoreStatus.OK

    def __str__(self) -> str:
        # KeyError would repr() its args otherwise.
        return str(self.args[0]) if self.args else ''


class StoreIOError(StoreError, OSError):
    """File unable to be opened or decoded for reading, or unable to be written."""
    def __init__(self, message: str, status: StoreStatus) -> None:
        super().__init__(message)
        self.status = status


class StoreEmptyError(StoreError):
    status = StoreStatus.STORE_EMPTY


class SectionNotFoundError(StoreError, KeyError):
    status = StoreStatus.NOT_FOUND


class KeyNotFoundError(StoreError, KeyError):
    status = StoreStatus.NOT_FOUND


class MalformedIdentifierError(StoreError, ValueError):
    """Raised instead of the warning when the store runs in strict mode."""
    status = StoreStatus.MALFORMED_IDENTIFIER


class MalformedIdentifierWarning(UserWarning):
    pass
