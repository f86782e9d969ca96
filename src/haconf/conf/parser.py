# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:08:41
# @Author : Kariko Lin

"""Line parsing for haproxy-like config files.

There's no formal grammar here, just the following:

    listen s 0.0.0.0:80             ; section header, if `listen` is known
        server s1 10.0.0.1:80 check # anything else is a key

1. The first `;` or `#` NOT led by a backslash starts the comment.
2. What's left gets split on whitespace. First word is the name.
3. The tail is paired up two by two from the right as `key value`.
It mispairs on odd runs of flags. That's how existing consumers read it,
so leave it be.
"""

import logging
from io import StringIO
from re import compile as regex
from typing import Iterator

import chardet

from ..abstract import LineSource
from .consts import COMMENT_CHARS, MIN_CODEC_CONFIDENCE
from .model import Property

_COMMENT = regex(r'(?<!\\)[%s]' % COMMENT_CHARS)


class ConfReadError(OSError):
    """A config file could not be opened, read or decoded."""
    pass


def split_comment(raw: str) -> tuple[str, str]:
    """Returns `(content, comment)`. Comment is `''` if there's none."""
    match = _COMMENT.search(raw)
    if match is None:
        return raw, ''
    return raw[:match.start()], raw[match.end():]


def pair_tail(fields: list[str]) -> dict[str, str]:
    values = fields[1:]
    ret: dict[str, str] = {}
    # leftmost pair wins on duplicated keys, as it's written last.
    for i in range(len(fields) - 2, 0, -2):
        ret[values[i - 1]] = values[i]
    return ret


def parse_line(raw: str) -> Property | None:
    """解析一行原文。

    空行、纯注释行返回`None`，调用方直接丢掉即可；
    其余情况一律返回`Property`，哪怕尾部配对毫无意义也不报错。
    """
    content, comment = split_comment(raw)
    fields = content.split()
    if not fields:
        return None
    return Property(
        name=fields[0],
        values=fields[1:],
        kwvals=pair_tail(fields),
        comment=comment)


class ConfFileReader(LineSource[str]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    def _decode(self, raw: bytes) -> str:
        codec = self._codec
        if codec is None:
            guess = chardet.detect(raw)
            # chardet gives None on empty input.
            if guess['encoding'] is None \
                    or guess['confidence'] < MIN_CODEC_CONFIDENCE:
                codec = 'utf-8'
            else:
                codec = guess['encoding']
            logging.debug(f'`{self._fn}` decoded as {codec}.')
        return raw.decode(codec)

    def read(self) -> StringIO:
        """把整个文件读进来并解码。

        打不开、读不了、解不了码，统统转成`ConfReadError`。
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            logging.warning(f'Unable to read `{self._fn}`:\n  {e}')
            raise ConfReadError(
                e.errno, f'无法读取配置文件：{e.strerror}', self._fn) from e

        try:
            return StringIO(self._decode(raw))
        except (UnicodeDecodeError, LookupError) as e:
            logging.warning(f'Unable to decode `{self._fn}`:\n  {e}')
            raise ConfReadError(
                None, f'无法解码配置文件（{self._codec or "auto"}）：{e}',
                self._fn) from e

    def lines(self) -> Iterator[str]:
        # no line continuation, so one physical line is one statement.
        buf = self.read()
        while (i := buf.readline()):
            yield i.rstrip('\r\n')

    def __str__(self) -> str:
        return f'{super().__str__()}({self._codec or "auto"})'
