#############################################################################
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
#############################################################################
#
#  Project Name        :    MPEG DASH manifest codec
#
#  Author              :    Alex Ashley
#
#############################################################################
"""
Declarations that describe how each field of an MPD element maps on to
XML. The same declaration is used for both encoding and decoding.
"""
from dataclasses import dataclass, field
from enum import IntEnum
import re
from typing import Any, Callable, NamedTuple, Union

from dashmpd.utils.list_of import ListOf

from .conditional_uint import ConditionalUint, UINT64_MAX

XML_BINDING = 'xml'

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT32_MAX = (1 << 32) - 1

class XmlKind(IntEnum):
    ATTRIBUTE = 1
    NAMESPACE = 2
    ELEMENT = 3
    TEXT = 4


class ValueType(NamedTuple):
    name: str
    from_text: Callable[[str, str], Any]
    to_text: Callable[[Any], str | None]
    empty: Any


def _string_from_text(text: str, name: str) -> str:
    return text

def _string_to_text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f'Expected a string, got {type(value).__name__}')
    return value


_UNSIGNED_RE = re.compile(r'\+?[0-9]+')
_SIGNED_RE = re.compile(r'[+-]?[0-9]+')

def _integer_parser(pattern: re.Pattern, minimum: int, maximum: int) -> Callable[[str, str], int]:
    def from_text(text: str, name: str) -> int:
        text = text.strip()
        if not pattern.fullmatch(text):
            raise ValueError(f'"{text}" is not a valid integer')
        value = int(text, 10)
        if value < minimum or value > maximum:
            raise ValueError(f'{value} is out of range for "{name}"')
        return value
    return from_text

def _integer_formatter(minimum: int, maximum: int) -> Callable[[Any], str]:
    def to_text(value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'Expected an integer, got {type(value).__name__}')
        if value < minimum or value > maximum:
            raise ValueError(f'{value} is out of range [{minimum}, {maximum}]')
        return f'{value:d}'
    return to_text


def _boolean_from_text(text: str, name: str) -> bool:
    lower = text.strip().lower()
    if lower in {'true', '1'}:
        return True
    if lower in {'false', '0'}:
        return False
    raise ValueError(f'"{text}" is not a valid boolean')

def _boolean_to_text(value: Any) -> str:
    if not isinstance(value, bool):
        raise TypeError(f'Expected a bool, got {type(value).__name__}')
    return 'true' if value else 'false'


def _conditional_from_text(text: str, name: str) -> ConditionalUint:
    return ConditionalUint.from_xml_attr(text, name)

def _conditional_to_text(value: Any) -> str | None:
    if not isinstance(value, ConditionalUint):
        value = ConditionalUint(value)
    return value.to_xml_attr()


STRING = ValueType('string', _string_from_text, _string_to_text, '')
UNSIGNED = ValueType(
    'unsignedLong', _integer_parser(_UNSIGNED_RE, 0, UINT64_MAX),
    _integer_formatter(0, UINT64_MAX), 0)
UNSIGNED_INT = ValueType(
    'unsignedInt', _integer_parser(_UNSIGNED_RE, 0, UINT32_MAX),
    _integer_formatter(0, UINT32_MAX), 0)
SIGNED = ValueType(
    'long', _integer_parser(_SIGNED_RE, INT64_MIN, INT64_MAX),
    _integer_formatter(INT64_MIN, INT64_MAX), 0)
BOOLEAN = ValueType('boolean', _boolean_from_text, _boolean_to_text, False)
CONDITIONAL_UINT = ValueType(
    'ConditionalUintType', _conditional_from_text, _conditional_to_text, None)


@dataclass(slots=True, frozen=True, kw_only=True)
class XmlBinding:
    """
    Describes where one field lives in the XML document
    """
    kind: XmlKind
    name: str | None = None
    value_type: ValueType | None = None
    clazz: Union[type, ListOf, None] = None
    required: bool = False
    omit_empty: bool = True
    prefix: str | None = None

    @property
    def repeated(self) -> bool:
        return isinstance(self.clazz, ListOf)


def xml_attribute(name: str, value_type: ValueType = STRING,
                  required: bool = False, default: Any = None,
                  prefix: str | None = None):
    """
    An attribute. If prefix is set, the attribute is written in that
    namespace and the namespace must be declared on an enclosing element.
    """
    binding = XmlBinding(
        kind=XmlKind.ATTRIBUTE, name=name, value_type=value_type,
        required=required, prefix=prefix)
    metadata = {XML_BINDING: binding}
    if value_type is CONDITIONAL_UINT:
        return field(default_factory=ConditionalUint, metadata=metadata)
    if required and default is None:
        default = value_type.empty
    return field(default=default, metadata=metadata)


def xml_namespace(prefix: str | None):
    """
    A namespace URI that is written as a bare attribute named after its
    prefix. The rewrite pass turns it into an xmlns declaration.
    """
    binding = XmlBinding(kind=XmlKind.NAMESPACE, name=prefix)
    return field(default=None, metadata={XML_BINDING: binding})


def xml_element(name: str, clazz: Union[type, ListOf], omit_empty: bool = True,
                prefix: str | None = None):
    binding = XmlBinding(
        kind=XmlKind.ELEMENT, name=name, clazz=clazz, omit_empty=omit_empty,
        prefix=prefix)
    metadata = {XML_BINDING: binding}
    if isinstance(clazz, ListOf):
        return field(default_factory=list, metadata=metadata)
    if clazz is str:
        return field(default='', metadata=metadata)
    return field(default=None, metadata=metadata)


def xml_text():
    binding = XmlBinding(kind=XmlKind.TEXT, value_type=STRING)
    return field(default=None, metadata={XML_BINDING: binding})
