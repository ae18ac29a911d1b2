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
from dataclasses import dataclass

from .fields import xml_attribute
from .mpd_element import MpdElement

@dataclass(slots=True, kw_only=True)
class Descriptor(MpdElement):
    schemeIdUri: str | None = xml_attribute('schemeIdUri')
    value: str | None = xml_attribute('value')
    id: str | None = xml_attribute('id')


@dataclass(slots=True, kw_only=True)
class AudioChannelConfiguration(MpdElement):
    schemeIdUri: str | None = xml_attribute('schemeIdUri')
    # an integer for most schemes, but a hex string for Dolby schemes
    value: str | None = xml_attribute('value')
