# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 21:52:17
# @Author : Kariko Lin

"""
Records of a haproxy-like config, one per meaningful line.

How those records group into sections, see `conf.store`.
"""

from dataclasses import dataclass, field


class SectionNotFound(KeyError):
    """No section declared with that name."""
    pass


class SectionIndexError(IndexError):
    """Section exists, but not that many instances of it."""
    pass


@dataclass(kw_only=True)
class Property:
    """一行配置（小节头或者键）。

    `name` 是第一个词，`values` 是其后所有的词（按原顺序，可重复），
    `kwvals` 则是从行尾两两倒推出来的“键值对”，只是个方便用的猜测。
    `comment` 为第一个未转义的`;`或`#`之后的原文。
    """
    name: str
    values: list[str] = field(default_factory=list)
    kwvals: dict[str, str] = field(default_factory=dict)
    comment: str = ''

    def get_all_slice_value(self) -> list[str]:
        return self.values

    def get_all_map_value(self) -> dict[str, str]:
        return self.kwvals

    def get_value(self, key: str, default: str = '') -> str:
        """按键取值。找不到就给`default`（默认空串），不抛异常。"""
        return self.kwvals.get(key, default)

    def get_value_index(self, index: int) -> str:
        """按位置取值（不含`name`）。越界照常抛`IndexError`。"""
        return self.values[index]

    def __str__(self) -> str:
        ret = ' '.join([self.name, *self.values])
        if self.comment:
            ret += f' #{self.comment}'
        return ret


# key name -> every record of that key, in file order,
# within ONE section instance.
type KeyTable = dict[str, list[Property]]
