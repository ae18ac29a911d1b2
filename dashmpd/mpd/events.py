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

from .fields import SIGNED, xml_attribute, xml_element
from .mpd_element import MpdElement

@dataclass(slots=True, kw_only=True)
class Event(MpdElement):
    id: str | None = xml_attribute('id')
    presentationTime: int | None = xml_attribute('presentationTime', SIGNED)
    duration: int | None = xml_attribute('duration', SIGNED)


@dataclass(slots=True, kw_only=True)
class EventStreamBase(MpdElement):
    schemeIdUri: str | None = xml_attribute('schemeIdUri')
    value: str | None = xml_attribute('value')
    timescale: int | None = xml_attribute('timescale', SIGNED)
    events: list[Event] = xml_element('Event', ListOf(Event))


@dataclass(slots=True, kw_only=True)
class EventStream(EventStreamBase):
    """
    Timed events that are carried in the manifest of one Period
    """


@dataclass(slots=True, kw_only=True)
class ProgramEventStream(EventStreamBase):
    """
    Same structure as EventStream, used for events that are signalled
    for the whole programme rather than for one Period
    """
