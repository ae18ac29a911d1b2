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

from dashmpd.utils.list_of import ListOf

from .adaptation_set import AdaptationSet
from .descriptor import Descriptor
from .events import EventStream, ProgramEventStream
from .fields import xml_attribute, xml_element
from .mpd_element import MpdElement

@dataclass(slots=True, kw_only=True)
class Period(MpdElement):
    start: str | None = xml_attribute('start')
    id: str | None = xml_attribute('id')
    duration: str | None = xml_attribute('duration')
    supplementalProperty: Descriptor | None = xml_element(
        'SupplementalProperty', Descriptor)
    BaseURL: str = xml_element('BaseURL', str)
    eventStreams: list[EventStream] = xml_element(
        'EventStream', ListOf(EventStream))
    programEventStreams: list[ProgramEventStream] = xml_element(
        'ProgramEventStream', ListOf(ProgramEventStream))
    adaptationSets: list[AdaptationSet] = xml_element(
        'AdaptationSet', ListOf(AdaptationSet))
