# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os
import shutil

from jsonschema import Draft4Validator as Validator
from pytest import fixture


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def fixed_clock():
    "A clock for currentDate, frozen at 2021-01-01T00:00:00Z."
    return lambda: 1609459200.0


@fixture
def person():
    return {
        "name": "Michael",
        "age": 16,
        "location": "My house",
        "favoriteFoods": [{"name": "galbi"}],
    }


@fixture
def json_schema_result(request):
    schema_path = os.path.join(schema_dir, 'verification_result.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def result_validator(request, json_schema_result):
    return Validator(json_schema_result)
