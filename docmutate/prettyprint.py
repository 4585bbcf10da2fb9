# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import pprint
import sys

import colorama


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


ColoredConstants = namedtuple('ColoredConstants', (
    'DENY',
    'ALLOW',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        DENY  = '{color}-  '.format(color=colorama.Fore.RED),
        ALLOW = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO  = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        DENY  = '-  ',
        ALLOW = '+  ',
        INFO  = '## ',
        RESET = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def DENY(self):
        return col_const[self.use_color].DENY

    @property
    def ALLOW(self):
        return col_const[self.use_color].ALLOW

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple value for printing, using pprint for anything but strings."
    if not isinstance(v, str):
        return pprint.pformat(v)
    return v


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    Keys are printed in document order.
    """
    for k, v in d.items():
        if k not in exclude_keys:
            pretty_print_item(k, v, prefix, config)


def pretty_print_document(doc, config=DefaultConfig):
    "Pretty-print a document."
    if isinstance(doc, dict):
        pretty_print_dict(doc, (), "", config)
    elif isinstance(doc, list):
        pretty_print_list(doc, "", config)
    else:
        config.out.write("%s\n" % format_value(doc))


def pretty_print_verification(result, config=DefaultConfig):
    """Pretty-print a verification result.

    A header line tells whether the update is allowed, followed
    by one line per denied field.
    """
    if result.allowed:
        config.out.write("%supdate allowed%s\n" % (config.ALLOW, config.RESET))
        return
    n = len(result.errors)
    config.out.write("%supdate denied, %d field%s not permitted:%s\n" % (
        config.INFO, n, "" if n == 1 else "s", config.RESET))
    for path in result.errors:
        config.out.write("%s%s%s\n" % (config.DENY, path, config.RESET))
