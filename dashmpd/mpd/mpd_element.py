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
from dataclasses import dataclass, fields
from typing import ClassVar

from dashmpd.utils.list_of import object_from

from .conditional_uint import ConditionalUint
from .fields import CONDITIONAL_UINT, XML_BINDING, XmlBinding, XmlKind

@dataclass(slots=True, kw_only=True)
class MpdElement:
    """
    Base class for all of the element types in an MPD document
    """
    TAG: ClassVar[str] = ''

    def __post_init__(self) -> None:
        for name, binding in self.xml_bindings():
            value = getattr(self, name)
            if binding.kind == XmlKind.ATTRIBUTE:
                if (binding.value_type is CONDITIONAL_UINT and
                        not isinstance(value, ConditionalUint)):
                    setattr(self, name, ConditionalUint(value))
            elif binding.kind == XmlKind.ELEMENT:
                if binding.repeated:
                    if value is None or any(isinstance(v, dict) for v in value):
                        setattr(self, name, binding.clazz(value))
                elif isinstance(value, dict):
                    setattr(self, name, object_from(binding.clazz, value))

    @classmethod
    def xml_bindings(clz) -> list[tuple[str, XmlBinding]]:
        """
        Returns (field name, binding) for every field, in declaration order
        """
        return [(f.name, f.metadata[XML_BINDING]) for f in fields(clz)
                if XML_BINDING in f.metadata]

    @classmethod
    def classname(clz) -> str:
        if clz.__module__.startswith('__'):
            return clz.__name__
        return clz.__module__ + '.' + clz.__name__
