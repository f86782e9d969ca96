# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Iterator, TypeVar

T = TypeVar('T')


class LineSource[T](metaclass=ABCMeta):
    """Anything that turns one file name into an ordered run of lines."""
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def lines(self) -> Iterator[T]:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
