# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 20:52:30

from abc import ABCMeta, abstractmethod


class FileHandler[T](metaclass=ABCMeta):
    """Something that turns the file `filename` into a `T`.

    Read only: writing back is out of this package's business.
    """
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
