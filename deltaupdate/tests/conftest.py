# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from .utils import make_source


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption("--quick", default=False):
        skip("skipping slow test")


@fixture
def source():
    return make_source()


@fixture
def json_schema_diff(request):
    schema_path = os.path.join(schema_dir, 'diff_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def diff_validator(request, json_schema_diff):
    return Validator(json_schema_diff)


@fixture
def write_json_file(tmpdir):
    """Fixture returning a function writing json files into a temporary directory"""
    def write(name, obj):
        path = str(tmpdir.join(name))
        with io.open(path, 'w', encoding='utf8') as f:
            json.dump(obj, f)
        return path
    return write


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty working directory with no jupyter config dirs."""
    config_dir = tmpdir.mkdir('jupyter-config')
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(config_dir))
    monkeypatch.delenv('JUPYTER_CONFIG_PATH', raising=False)
    monkeypatch.chdir(str(tmpdir))
    return tmpdir
