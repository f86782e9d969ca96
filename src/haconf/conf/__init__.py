# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:38:55
# @Author : Kariko Lin

from .consts import DEFAULT_SECTION, HAPROXY_SECTIONS
from .model import Property, KeyTable, SectionNotFound, SectionIndexError
from .parser import ConfFileReader, ConfReadError, parse_line
from .store import ConfigFile
