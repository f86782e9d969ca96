# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/10/13 00:31:52
# @Author : Kariko Lin

"""
haproxy-like config, grouped into sections.

Which first words open a section is up to the caller, e.g.

    ```python
    cf = ConfigFile()
    cf.set_section_names('global', 'defaults', 'listen')
    cf.load_file('haproxy.cfg')
    cf.get_keys_index('listen', 1)['server'][0].get_value('inter')
    ```

A section name may show up many times, and so may a key in one section.
Each appearance is kept as its own instance, nothing merged.
"""

import logging
import sys
from threading import RLock
from typing import TextIO
from warnings import warn

from .consts import DEFAULT_SECTION
from .model import KeyTable, Property, SectionIndexError, SectionNotFound
from .parser import ConfFileReader, parse_line


class ConfigFile:
    """配置文件（或者好几个文件）的内存表示。

    `load_file()`只管往里追加，读到一半失败也不回滚；
    `reload()`则是整体重建，成功了才替换，失败了原样不动。
    """
    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding
        # RLock since load_string() calls add_section()/add_key().
        self._lock = RLock()
        self._section_names: list[str] = []
        self._filenames: list[str] = []
        # section name -> [header of instance 0, header of instance 1, ...]
        self._sections: dict[str, list[Property]] = {}
        # section name -> [keys of instance 0, keys of instance 1, ...]
        self._keys: dict[str, list[KeyTable]] = {}
        # (section name, instance index) where keys go now.
        self._current: tuple[str, int] | None = None

    @property
    def encoding(self) -> str | None:
        return self._codec

    @property
    def section_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._section_names)

    @property
    def filenames(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._filenames)

    def set_section_names(self, *names: str) -> None:
        """追加可识别的小节名。可以分几次调，重复了也无妨。

        只影响之后读进来的行。
        """
        with self._lock:
            self._section_names.extend(names)

    def add_section(self, section: str, prop: Property) -> None:
        """新开一个小节实例，哪怕同名的已经有了。"""
        with self._lock:
            self._sections.setdefault(section, []).append(prop)
            instances = self._keys.setdefault(section, [])
            instances.append({})
            self._current = (section, len(instances) - 1)

    def add_key(self, prop: Property) -> None:
        with self._lock:
            if self._current is None:
                warn(
                    f'"{prop.name}" 出现在任何小节之前，'
                    f'将归入 [{DEFAULT_SECTION}] 小节。')
                self.add_section(
                    DEFAULT_SECTION, Property(name=DEFAULT_SECTION))
            section, index = self._current
            keys = self._keys[section][index]
            keys.setdefault(prop.name, []).append(prop)

    def load_string(self, line: str) -> None:
        """解析一行，按第一个词决定它是小节头还是键。空行直接忽略。"""
        prop = parse_line(line)
        if prop is None:
            return
        with self._lock:
            if prop.name in self._section_names:
                self.add_section(prop.name, prop)
            else:
                self.add_key(prop)

    def load_file(self, *filenames: str) -> None:
        """按顺序读入若干文件。

        遇到第一个读不了的文件就抛`ConfReadError`，后面的文件不再读；
        已经读进来的行保留（不回滚）。
        """
        with self._lock:
            self._filenames.extend(filenames)
            for i in filenames:
                reader = ConfFileReader(i, self._codec)
                logging.debug(f'Loading {reader}')
                for line in reader.lines():
                    self.load_string(line)
                logging.info(f'Loaded `{i}`.')

    def reload(self) -> None:
        """用同样的文件和小节名重新读一遍，成功后整体替换当前内容。

        失败时抛出原异常，当前内容保持不变。
        """
        with self._lock:
            filenames = list(self._filenames)
            section_names = list(self._section_names)

        fresh = ConfigFile(self._codec)
        fresh.set_section_names(*section_names)
        fresh.load_file(*filenames)

        with self._lock:
            self._section_names = fresh._section_names
            self._filenames = fresh._filenames
            self._sections = fresh._sections
            self._keys = fresh._keys
            self._current = fresh._current
        logging.info(f'Reloaded {len(filenames)} file(s).')

    def get_all_sections(self) -> dict[str, list[Property]]:
        with self._lock:
            return {k: list(v) for k, v in self._sections.items()}

    def get_section(self, name: str) -> list[Property]:
        with self._lock:
            if name not in self._sections:
                raise SectionNotFound(name)
            return list(self._sections[name])

    def get_section_index(self, name: str, index: int) -> Property:
        with self._lock:
            return self._sections[name][self.__check_index(name, index)]

    def get_all_keys(self, name: str) -> list[KeyTable]:
        """取某名字下所有小节实例的键表，与`get_section()`一一对应。"""
        with self._lock:
            if name not in self._keys:
                raise SectionNotFound(name)
            return [self.__copy_keys(i) for i in self._keys[name]]

    def get_keys_index(self, name: str, index: int) -> KeyTable:
        with self._lock:
            return self.__copy_keys(
                self._keys[name][self.__check_index(name, index)])

    def __check_index(self, name: str, index: int) -> int:
        if name not in self._sections:
            raise SectionNotFound(name)
        if not 0 <= index < len(self._sections[name]):
            raise SectionIndexError(
                f'[{name}] 只有 {len(self._sections[name])} 个实例，'
                f'索引 {index} 越界。')
        return index

    @staticmethod
    def __copy_keys(keys: KeyTable) -> KeyTable:
        return {k: list(v) for k, v in keys.items()}

    def dumps(self) -> str:
        """For eyes only. Never meant to be read back."""
        ret = []
        with self._lock:
            for name, sections in self._sections.items():
                for section, keys in zip(sections, self._keys[name]):
                    ret.append(str(section))
                    for props in keys.values():
                        ret.extend(f'\t{i}' for i in props)
        return '\n'.join(ret)

    def print_conf(self, file: TextIO | None = None) -> None:
        print(self.dumps(), file=file or sys.stdout)

    def __str__(self) -> str:
        return f'ConfigFile({", ".join(self._filenames) or "<memory>"})'
