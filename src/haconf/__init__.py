# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:36:10
# @Author : Kariko Lin

import logging

from .conf import (
    DEFAULT_SECTION, HAPROXY_SECTIONS,
    Property, KeyTable, ConfigFile, parse_line, ConfFileReader,
    SectionNotFound, SectionIndexError, ConfReadError
)

__all__ = [
    'DEFAULT_SECTION', 'HAPROXY_SECTIONS',
    'Property', 'KeyTable', 'ConfigFile', 'parse_line', 'ConfFileReader',
    'SectionNotFound', 'SectionIndexError', 'ConfReadError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
