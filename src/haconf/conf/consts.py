# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:40:06
# @Author : Kariko Lin

# keys before any section header land here.
DEFAULT_SECTION = 'DEFAULT'

COMMENT_CHARS = ';#'

# haproxy's own section keywords, for callers who don't want to list them.
HAPROXY_SECTIONS = (
    'global',
    'defaults',
    'frontend',
    'backend',
    'listen',
    'userlist',
    'peers',
    'resolvers',
    'mailers',
    'program',
    'cache',
    'http-errors',
    'ring',
)

# below this `chardet` confidence we'd rather trust UTF-8.
MIN_CODEC_CONFIDENCE = 0.8
