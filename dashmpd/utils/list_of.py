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

def object_from(clz, value):
    """
    Create an instance of clz from value. A dictionary is used as
    keyword arguments, an existing instance is returned unchanged.
    """
    if value is None:
        return None
    if isinstance(clz, type) and isinstance(value, clz):
        return value
    if isinstance(value, dict):
        return clz(**value)
    return clz(value)


class ListOf:
    """
    Marks a field as an ordered sequence of clazz items
    """
    def __init__(self, clazz):
        self.clazz = clazz

    def __call__(self, value) -> list:
        if value is None:
            return []
        return [object_from(self.clazz, s) for s in value]

    def __repr__(self):
        return fr'ListOf({self.clazz.__name__})'
