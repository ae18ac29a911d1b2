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
from enum import IntEnum
import re

from .exceptions import MalformedUnion

UINT64_MAX = (1 << 64) - 1

class ConditionalKind(IntEnum):
    ABSENT = 0
    INTEGER = 1
    BOOLEAN = 2


class ConditionalUint:
    """
    ConditionalUintType from the DASH schema, a union of xs:unsignedInt
    and xs:boolean. An absent value means the attribute is omitted, which
    clients treat as "false".
    """
    __slots__ = ('_kind', '_value')

    DIGITS_RE = re.compile(r'[0-9]+')

    def __init__(self, value: int | bool | None = None) -> None:
        if value is None:
            kind = ConditionalKind.ABSENT
        elif isinstance(value, bool):
            kind = ConditionalKind.BOOLEAN
        elif isinstance(value, int):
            if value < 0 or value > UINT64_MAX:
                raise ValueError(f'{value} is not a 64 bit unsigned integer')
            kind = ConditionalKind.INTEGER
        else:
            raise TypeError(
                f'ConditionalUint requires an int or a bool, got {type(value).__name__}')
        object.__setattr__(self, '_kind', kind)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return (self.__class__, (self._value,))

    @classmethod
    def from_xml_attr(clz, text: str, name: str = '') -> "ConditionalUint":
        """
        Parse an attribute value. Integer syntax is tried before boolean
        syntax.
        """
        if clz.DIGITS_RE.fullmatch(text):
            value = int(text, 10)
            if value <= UINT64_MAX:
                return clz(value)
        lower = text.lower()
        if lower == 'true':
            return clz(True)
        if lower == 'false':
            return clz(False)
        raise MalformedUnion(name, text)

    def to_xml_attr(self) -> str | None:
        """
        Returns the attribute text, or None if the attribute is to be omitted
        """
        if self._kind == ConditionalKind.INTEGER:
            return f'{self._value:d}'
        if self._kind == ConditionalKind.BOOLEAN:
            return 'true' if self._value else 'false'
        return None

    @property
    def kind(self) -> ConditionalKind:
        return self._kind

    @property
    def integer(self) -> int | None:
        if self._kind == ConditionalKind.INTEGER:
            return self._value
        return None

    @property
    def boolean(self) -> bool | None:
        if self._kind == ConditionalKind.BOOLEAN:
            return self._value
        return None

    def is_absent(self) -> bool:
        return self._kind == ConditionalKind.ABSENT

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConditionalUint):
            return NotImplemented
        return self._kind == other._kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __repr__(self) -> str:
        if self._kind == ConditionalKind.ABSENT:
            return 'ConditionalUint()'
        return f'ConditionalUint({self._value!r})'
