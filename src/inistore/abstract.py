# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/19 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os.path import isfile
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """A reader/writer bound to one file on disk.

    The file may not exist yet; writers create it.
    """
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @property
    def path(self) -> str:
        return self._fn

    def exists(self) -> bool:
        return isfile(self._fn)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
