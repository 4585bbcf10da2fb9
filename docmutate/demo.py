# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .applying import mutate
from .args import (
    ConfigBackedParser, add_generic_args, add_apply_args, add_verify_args,
    add_prettyprint_args, prettyprint_config_from_args,
)
from .prettyprint import pretty_print_document, pretty_print_verification
from .utils import setup_std_streams
from .verifying import verify


_description = """Verify a sample update against a sample permission tree,
and apply it to a sample document if it is allowed.
"""


def sample_document():
    return {
        "name": "Michael",
        "age": 16,
        "location": "My house",
        "favoriteFoods": [{"name": "galbi"}],
    }


def sample_permissions():
    return {
        "push": {
            "favoriteFoods": True,
        },
    }


def sample_update():
    return {
        "set": {"name": "Michael"},
        "increment": {"age": 1},
        "push": {"favoriteFoods": [{"name": "banana"}]},
    }


def main_demo(args):
    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(args, out=Printer())

    document = sample_document()
    result = verify(
        sample_permissions(), sample_update(),
        default_permission=args.default_permission == 'allow',
        )
    pretty_print_verification(result, config=config)
    if not result.allowed:
        return 1

    after = mutate(
        document, sample_update(),
        operators=args.operators,
        addtoset_strategy=args.addtoset_strategy,
        )
    pretty_print_document(after, config=config)
    return 0


def _build_arg_parser():
    """Creates an argument parser for the demo command."""
    parser = ConfigBackedParser(
        prog='docmutate-demo',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_apply_args(parser)
    add_verify_args(parser)
    add_prettyprint_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_demo(arguments)


if __name__ == "__main__":
    sys.exit(main())
