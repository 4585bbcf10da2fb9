# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_verify_args, add_prettyprint_args, prettyprint_config_from_args,
)
from .prettyprint import pretty_print_verification
from .utils import read_json, setup_std_streams
from .verifying import verify


_description = """Check an update request against a permission tree.
Exits with status 0 if the update is allowed and 1 if any
field it touches is not permitted.
"""


def main_verify(args):
    permissions_filename = args.permissions
    update_filename = args.update

    for fn in (permissions_filename, update_filename):
        if fn != "-" and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        permissions = read_json(permissions_filename)
        update = read_json(update_filename)
        result = verify(
            permissions, update,
            default_permission=args.default_permission == 'allow',
            )
    except ValueError as e:
        print("Invalid input: {}".format(e))
        return 1

    if args.json:
        json.dump(result.as_dict(), sys.stdout)
        print()
    else:
        class Printer:
            def write(self, text):
                print(text, end="")

        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_verification(result, config=config)

    return 0 if result.allowed else 1


def _build_arg_parser():
    """Creates an argument parser for the docmutate-verify command."""
    parser = ConfigBackedParser(
        prog='docmutate-verify',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["permissions", "update"])
    add_verify_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument(
        '--json',
        action='store_true',
        default=False,
        help="print the verification result as JSON.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_verify(arguments)


if __name__ == "__main__":
    sys.exit(main())
