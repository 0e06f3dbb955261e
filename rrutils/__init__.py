"""Various useful utilities under one namespace.

Library references:

- ``httpx`` (HTTP client), also ``create_http_client`` and ``download_bytes_from_url``
- ``jwt`` from PyJWT, aliased as ``jsonwebtoken``
- ``xmltodict`` with ``parse_xml``, ``parse_xml_async``, ``xml2obj`` and ``obj2xml``
- ``pydantic`` with ``BaseModel`` and ``ValidationError`` for schema validation
- ``jinja2`` with ``Template`` for templating
- ``logging`` with ``make_logger``
- ``uuid`` (time-based ``uuid.uuid1``), ``os`` and ``Path``
- ``collections``, ``functools``, ``itertools`` and ``operator`` for collection
  helpers

Helpers: ``load_config``, ``to_string_without_exponent``, the ``is_*``
predicates, ``stringify``, ``safe_json_to_object``, timestamps, random values,
``wait``, ``trace`` and the ``DEBUG`` flag.

    from rrutils import load_config, jwt, httpx
"""

import collections
import functools
import itertools
import logging
import operator
import os
from pathlib import Path
from uuid import uuid1 as uuid

import httpx
import jinja2
import jwt
import pydantic
import xmltodict
from jinja2 import Template
from pydantic import BaseModel, ValidationError

from .core.config import Config
from .core.config_loader import ConfigAggregator, load_config, reset_config
from .core.errors import ConfigLoadError, DirectoryNotFoundError, InvalidInputError, RRUtilsError
from .core.http import create_http_client, download_bytes_from_url
from .core.logger import make_logger, trace
from .core.numbers import to_string_without_exponent
from .core.serialization import safe_json_to_object, stringify
from .core.timeutils import (
    get_future_date,
    get_random_int,
    get_random_money,
    get_short_timestamp,
    get_timestamp,
    wait,
)
from .core.validation import (
    event_is_verbose,
    is_even,
    is_non_empty_array,
    is_non_empty_object,
    is_non_empty_string,
)
from .services.xml import obj2xml, parse_xml, parse_xml_async, xml2obj

__version__ = "1.0.0"

jsonwebtoken = jwt

DEBUG: bool = Config.DEBUG

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseModel",
    "Config",
    "ConfigAggregator",
    "ConfigLoadError",
    "DEBUG",
    "DirectoryNotFoundError",
    "InvalidInputError",
    "Path",
    "RRUtilsError",
    "Template",
    "ValidationError",
    "collections",
    "create_http_client",
    "download_bytes_from_url",
    "event_is_verbose",
    "functools",
    "get_future_date",
    "get_random_int",
    "get_random_money",
    "get_short_timestamp",
    "get_timestamp",
    "httpx",
    "is_even",
    "is_non_empty_array",
    "is_non_empty_object",
    "is_non_empty_string",
    "itertools",
    "jinja2",
    "jsonwebtoken",
    "jwt",
    "load_config",
    "logging",
    "make_logger",
    "obj2xml",
    "operator",
    "os",
    "parse_xml",
    "parse_xml_async",
    "pydantic",
    "reset_config",
    "safe_json_to_object",
    "stringify",
    "to_string_without_exponent",
    "trace",
    "uuid",
    "wait",
    "xml2obj",
    "xmltodict",
]
