import asyncio
import json
import logging
from typing import Any, Dict, Union

import xmltodict

from ..core.validation import is_non_empty_object, is_non_empty_string


logger = logging.getLogger(__name__)

ROOT_NAME = 'root'


def parse_xml(xml: Union[str, bytes], **kwargs: Any) -> Dict[str, Any]:
    return xmltodict.parse(xml, **kwargs)


async def parse_xml_async(xml: Union[str, bytes], **kwargs: Any) -> Dict[str, Any]:
    """``parse_xml`` run in the default thread pool."""
    return await asyncio.to_thread(parse_xml, xml, **kwargs)


async def xml2obj(xml: Union[str, bytes]) -> Dict[str, Any]:
    """Parse XML into plain dicts.

    Attributes are merged into their element without an ``@`` prefix, element
    text next to attributes is stored under ``_``, and a child that occurs once
    stays a scalar instead of a one-item list.
    """
    return await parse_xml_async(xml, attr_prefix='', cdata_key='_')


def obj2xml(obj: Union[Dict[str, Any], str]) -> str:
    """Build an XML document from a non-empty dict or a JSON object string.

    A dict with more than one top-level key is wrapped in a ``<root>`` element.
    """
    if is_non_empty_string(obj):
        logger.warning(f"obj2xml converting to obj: {obj}")
        obj = json.loads(obj)
    if not is_non_empty_object(obj):
        raise ValueError("obj2xml requires an object")

    logger.debug(f"obj2xml building result: {obj}")
    if len(obj) > 1:
        obj = {ROOT_NAME: obj}
    try:
        return xmltodict.unparse(obj, pretty=True)
    except Exception as e:
        logger.error(f"obj2xml failed to build XML: {str(e)}")
        raise
